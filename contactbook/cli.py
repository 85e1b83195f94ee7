"""Command-line interface for managing a contacts file."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

from .book import Column, ContactBook
from .contact import (
    Contact,
    ValidationError,
    parse_birth_date,
    parse_phone_numbers,
    validate_contact,
)
from .storage import format_line, load_contacts, save_contacts

_COLUMN_NAMES = {column.name.lower().replace("_", "-"): column for column in Column}


def _load(path: Path) -> ContactBook:
    book = ContactBook()
    if not path.exists():
        return book
    report = load_contacts(path)
    for error in report.errors:
        print(f"warning: {error}", file=sys.stderr)
    for contact in report.contacts:
        book.add(contact)
    return book


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contactbook", description="Manage a contacts file.")
    commands = parser.add_subparsers(dest="command", required=True)

    listing = commands.add_parser("list", help="show contacts")
    listing.add_argument("file", type=Path)
    listing.add_argument("--search", default="")
    listing.add_argument("--sort", choices=sorted(_COLUMN_NAMES))

    add = commands.add_parser("add", help="add a contact")
    add.add_argument("file", type=Path)
    add.add_argument("--first-name", required=True)
    add.add_argument("--last-name", required=True)
    add.add_argument("--middle-name", required=True)
    add.add_argument("--address", default="")
    add.add_argument("--birth-date", required=True, help="dd.mm.yyyy")
    add.add_argument("--email", required=True)
    add.add_argument("--phones", required=True, help="comma-separated phone numbers")

    delete = commands.add_parser("delete", help="delete a contact")
    delete.add_argument("file", type=Path)
    delete.add_argument("index", type=int)

    edit = commands.add_parser("edit", help="change one field of a contact")
    edit.add_argument("file", type=Path)
    edit.add_argument("index", type=int)
    edit.add_argument("column", choices=sorted(_COLUMN_NAMES))
    edit.add_argument("text")

    export = commands.add_parser("export", help="save matching contacts to another file")
    export.add_argument("file", type=Path)
    export.add_argument("output", type=Path)
    export.add_argument("--search", default="")

    report = commands.add_parser("report", help="check a contacts file")
    report.add_argument("file", type=Path)
    return parser


def _contact_from_args(args: argparse.Namespace) -> Contact:
    phones = parse_phone_numbers(args.phones)
    if not phones:
        raise ValidationError("All phone numbers are invalid")
    birth_date = parse_birth_date(args.birth_date.strip())
    if birth_date is None:
        raise ValidationError("Invalid birth date")
    if birth_date > date.today():
        raise ValidationError("Birth date cannot be in the future")
    contact = Contact(
        first_name=args.first_name.strip(),
        last_name=args.last_name.strip(),
        middle_name=args.middle_name.strip(),
        address=args.address.strip(),
        birth_date=birth_date,
        email=args.email.strip(),
        phone_numbers=phones,
    )
    return validate_contact(contact)


def _run(args: argparse.Namespace) -> None:
    if args.command == "report":
        print(load_contacts(args.file).summary())
        return

    book = _load(args.file)
    if args.command == "list":
        if args.sort:
            book.sort_by(_COLUMN_NAMES[args.sort])
        matched = {id(contact) for contact in book.search(args.search)}
        for index, contact in enumerate(book):
            if id(contact) in matched:
                print(f"{index}: {format_line(contact)}")
    elif args.command == "add":
        book.add(_contact_from_args(args))
        save_contacts(args.file, book)
        print("Contact added.")
    elif args.command == "delete":
        book.delete(args.index)
        save_contacts(args.file, book)
    elif args.command == "edit":
        book.edit(args.index, _COLUMN_NAMES[args.column], args.text)
        save_contacts(args.file, book)
    elif args.command == "export":
        save_contacts(args.output, book.search(args.search))


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except ValidationError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    except IndexError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())