"""Reading and writing contacts as comma-separated lines."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, Union

from .book import Column, ContactBook
from .contact import (
    Contact,
    ValidationError,
    format_birth_date,
    parse_birth_date,
)

_PathType = Union[str, "PathLike[str]"]
_FIELD_COUNT = 7
_STRIP_PHONE_RE = re.compile(r"[^\d+\s-]", re.ASCII)


@dataclass
class ImportReport:
    """The outcome of loading a contacts file."""

    contacts: list[Contact] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def summary(self) -> str:
        """Describe how many contacts were added and which problems were found."""
        text = f"Import finished.\nContacts added: {len(self.contacts)}\n\n"
        text += "\n".join(self.errors)
        return text.strip()


def _sanitize_phone(number: str) -> str:
    return _STRIP_PHONE_RE.sub("", number.strip()).replace(" ", "").replace("-", "")


def format_line(contact: Contact) -> str:
    """Render *contact* as one line of the contacts file, without a line break."""
    phones = ";".join(_sanitize_phone(number) for number in contact.phone_numbers)
    return ",".join(
        (
            contact.first_name,
            contact.last_name,
            contact.middle_name,
            contact.address,
            format_birth_date(contact.birth_date),
            contact.email,
            phones,
        )
    )


def parse_line(line: str) -> Contact:
    """Build a contact from one line of the contacts file."""
    parts = line.split(",")
    if len(parts) < _FIELD_COUNT:
        raise ValueError("incomplete data in line")
    return Contact(
        first_name=parts[0],
        last_name=parts[1],
        middle_name=parts[2],
        address=parts[3],
        birth_date=parse_birth_date(parts[4]),
        email=parts[5],
        phone_numbers=parts[6].split(";"),
    )


def save_contacts(path: _PathType, contacts: Iterable[Contact]) -> None:
    """Write *contacts* to *path*, one per line."""
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        for contact in contacts:
            handle.write(format_line(contact) + "\n")


def _cells(contact: Contact) -> dict[Column, str]:
    return {
        Column.FIRST_NAME: contact.first_name,
        Column.LAST_NAME: contact.last_name,
        Column.MIDDLE_NAME: contact.middle_name,
        Column.ADDRESS: contact.address,
        Column.BIRTH_DATE: format_birth_date(contact.birth_date),
        Column.EMAIL: contact.email,
        Column.PHONE_NUMBERS: ", ".join(contact.phone_numbers),
    }


def load_contacts(path: _PathType) -> ImportReport:
    """Read contacts from *path*, noting skipped lines and invalid fields."""
    book = ContactBook()
    report = ImportReport()
    with open(path, encoding="utf-8") as handle:
        for number, raw in enumerate(handle, start=1):
            try:
                contact = parse_line(raw.rstrip("\n"))
            except ValueError:
                report.errors.append(f"Line {number}: incomplete data.")
                continue
            book.add(contact)
            index = len(book) - 1
            for column, text in _cells(contact).items():
                try:
                    book.edit(index, column, text)
                except ValidationError as error:
                    report.errors.append(f"Line {number}: {error}")
    report.contacts = list(book)
    return report