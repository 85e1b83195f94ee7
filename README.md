# contactbook

A small address book. Each contact has a first name, last name, middle name,
address, birth date, e-mail address and one or more phone numbers. Contacts
are checked before they are stored. The book can be searched, sorted by any
column, and saved to or loaded from a simple CSV file.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `contactbook` command. Every subcommand
works on one contacts file. A file that does not exist yet is treated as an
empty book.

```
contactbook --help
contactbook list FILE [--search TEXT] [--sort COLUMN]
contactbook add FILE --first-name NAME --last-name NAME --middle-name NAME \
    [--address TEXT] --birth-date DD.MM.YYYY --email ADDRESS --phones NUMBERS
contactbook delete FILE INDEX
contactbook edit FILE INDEX COLUMN TEXT
contactbook export FILE OUTPUT [--search TEXT]
contactbook report FILE
```

`COLUMN` is one of `first-name`, `last-name`, `middle-name`, `address`,
`birth-date`, `email` and `phone-numbers`.

- `list` prints the matching contacts as `INDEX: line`. With `--sort` the
  contacts are sorted for display only, so the indexes shown are positions in
  the sorted order.
- `add` checks the new contact and appends it. The birth date must be a valid
  `dd.mm.yyyy` date that is not in the future. `--phones` takes a
  comma-separated list.
- `delete` and `edit` take an index into the book in file order.
- `export` writes the contacts that match `--search` to `OUTPUT`.
- `report` prints the import summary for a file.

Problems found while loading the file are printed to standard error as
warnings. A validation error, a bad index or a file error prints `error: ...`
and exits with status 1.

## Using it from Python

The validation helpers live in `contactbook.contact`:

```python
from contactbook.contact import is_valid_name, is_valid_email, parse_birth_date

is_valid_name("Anna")               # True
is_valid_name("anna")               # False: must start with a capital
is_valid_email("anna@example.com")  # True
parse_birth_date("01.02.1990")      # datetime.date(1990, 2, 1)
parse_birth_date("31.02.1990")      # None
```

- `Contact` is a dataclass that holds the fields of one contact.
- `parse_phone_numbers` takes a comma-separated list. It drops the entries
  that do not look like phone numbers and strips everything except digits and
  `+` from the rest.
- `format_birth_date` writes a date as `dd.MM.yyyy`. It returns an empty
  string for `None`.
- `validate_contact` raises `ValidationError`, a subclass of `ValueError`,
  when a name, the e-mail address or the list of phone numbers is not
  acceptable. Otherwise it returns the contact.

`contactbook.book.ContactBook` holds the contacts in order and supports:

- `add` and `delete`.
- `edit`, which changes one field at a time, chosen by a `Column`. It raises
  `ValidationError` and leaves the field unchanged when the new value is
  invalid.
- `search`, which finds text anywhere in any field and ignores case.
- `sort_by` a column.
- `clear`, `len()`, iteration and indexing.

`contactbook.storage` reads and writes the CSV format, one contact per line:

```
first,last,middle,address,dd.MM.yyyy,email,phone;phone;...
```

- `save_contacts(path, contacts)` writes such a file.
- `load_contacts(path)` reads one back and returns an `ImportReport`.
  - Lines with fewer than seven fields are skipped and recorded as errors.
  - Invalid fields on the remaining lines are recorded as errors as well.
  - `summary()` tells how many contacts were added and lists the problems.
- `format_line` and `parse_line` work on a single line.

## What it does not do

There is no interactive or graphical table view. The book is used through
the subcommands above or from Python, and each command reads and rewrites
the file.