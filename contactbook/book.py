"""An in-memory address book with editing, searching and sorting."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator

from .contact import (
    Contact,
    ValidationError,
    format_birth_date,
    is_valid_email,
    is_valid_name,
    parse_birth_date,
    parse_phone_numbers,
)


class Column(IntEnum):
    """The columns of the contact table, in display order."""

    FIRST_NAME = 0
    LAST_NAME = 1
    MIDDLE_NAME = 2
    ADDRESS = 3
    BIRTH_DATE = 4
    EMAIL = 5
    PHONE_NUMBERS = 6


_NAME_COLUMNS = {
    Column.FIRST_NAME: ("first_name", "Invalid first name"),
    Column.LAST_NAME: ("last_name", "Invalid last name"),
    Column.MIDDLE_NAME: ("middle_name", "Invalid middle name"),
}


def _cell_text(contact: Contact, column: Column) -> str:
    if column is Column.BIRTH_DATE:
        return format_birth_date(contact.birth_date)
    if column is Column.PHONE_NUMBERS:
        return "\n".join(contact.phone_numbers)
    return getattr(contact, column.name.lower())


class ContactBook:
    """An ordered collection of contacts."""

    def __init__(self) -> None:
        self._contacts: list[Contact] = []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def __getitem__(self, index: int) -> Contact:
        return self._contacts[index]

    def _row(self, index: int) -> Contact:
        if not 0 <= index < len(self._contacts):
            raise IndexError(f"no contact at index {index}")
        return self._contacts[index]

    def add(self, contact: Contact) -> None:
        """Append *contact* to the book."""
        self._contacts.append(contact)

    def delete(self, index: int) -> Contact:
        """Remove and return the contact at *index*."""
        self._row(index)
        return self._contacts.pop(index)

    def clear(self) -> None:
        """Remove every contact."""
        self._contacts.clear()

    def edit(self, index: int, column: Column | int, text: str) -> Contact:
        """Set one field of a contact from its table text; invalid values leave it unchanged."""
        contact = self._row(index)
        column = Column(column)
        if column in _NAME_COLUMNS:
            attribute, message = _NAME_COLUMNS[column]
            value = text.strip()
            if not is_valid_name(value):
                raise ValidationError(message)
            setattr(contact, attribute, value)
        elif column is Column.ADDRESS:
            contact.address = text.strip()
        elif column is Column.BIRTH_DATE:
            birth_date = parse_birth_date(text)
            if birth_date is None:
                raise ValidationError("Invalid birth date")
            contact.birth_date = birth_date
        elif column is Column.EMAIL:
            value = text.strip()
            if not is_valid_email(value):
                raise ValidationError("Invalid email")
            contact.email = value
        else:
            numbers = parse_phone_numbers(text.strip())
            if not numbers:
                raise ValidationError("Invalid phone number")
            contact.phone_numbers = numbers
        return contact

    def search(self, text: str) -> list[Contact]:
        """Return the contacts with any field containing *text*, ignoring case."""
        needle = text.casefold()
        return [
            contact
            for contact in self._contacts
            if any(needle in _cell_text(contact, column).casefold() for column in Column)
        ]

    def sort_by(self, column: Column | int) -> None:
        """Sort the contacts in ascending order of one column's text."""
        column = Column(column)
        self._contacts.sort(key=lambda contact: _cell_text(contact, column))