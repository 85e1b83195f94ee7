"""Contact records and validation of their fields."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date

log = logging.getLogger(__name__)

DATE_FORMAT = "%d.%m.%Y"

_NAME_RE = re.compile(r"[A-ZА-ЯЁ][A-Za-zА-Яа-яёЁ\- ]*[a-zа-яё]")
_EMAIL_RE = re.compile(r"[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_PHONE_RE = re.compile(
    r"\+?\s?\d{1,3}[\s-]?(?:\(\d+\))?[\s-]?\d+(?:[\s-]\d+)*", re.ASCII
)
_NOT_PHONE_CHAR_RE = re.compile(r"[^\d+]", re.ASCII)
_DATE_RE = re.compile(r"(\d{2})\.(\d{2})\.(\d{4})", re.ASCII)


class ValidationError(ValueError):
    """Raised when a contact field holds an unacceptable value."""


@dataclass
class Contact:
    """One entry of the address book."""

    first_name: str = ""
    last_name: str = ""
    middle_name: str = ""
    address: str = ""
    birth_date: date | None = None
    email: str = ""
    phone_numbers: list[str] = field(default_factory=list)


def is_valid_name(name: str) -> bool:
    """Return True if *name* starts with a capital and ends with a lower-case letter."""
    return _NAME_RE.fullmatch(name.strip()) is not None


def is_valid_email(email: str) -> bool:
    """Return True if *email* looks like a usable e-mail address."""
    return _EMAIL_RE.fullmatch(email.strip()) is not None


def parse_phone_numbers(text: str) -> list[str]:
    """Split comma-separated phone numbers, keeping the valid ones reduced to digits and '+'."""
    valid = []
    for part in text.split(","):
        if not part:
            continue
        number = part.strip()
        if _PHONE_RE.fullmatch(number):
            valid.append(_NOT_PHONE_CHAR_RE.sub("", number))
        else:
            log.debug("invalid phone number: %r", number)
    return valid


def parse_birth_date(text: str) -> date | None:
    """Parse a date written as dd.MM.yyyy; return None if it is not a valid date."""
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None
    day, month, year = (int(group) for group in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def format_birth_date(value: date | None) -> str:
    """Format a date as dd.MM.yyyy, or an empty string for a missing date."""
    if value is None:
        return ""
    return f"{value.day:02d}.{value.month:02d}.{value.year:04d}"


def validate_contact(contact: Contact) -> Contact:
    """Check names, e-mail and phone numbers of *contact*; return it if all are acceptable."""
    names = (contact.first_name, contact.last_name, contact.middle_name)
    if not all(is_valid_name(name) for name in names):
        raise ValidationError("First name, last name or middle name is invalid")
    if not is_valid_email(contact.email):
        raise ValidationError("Invalid email")
    if not contact.phone_numbers:
        raise ValidationError("All phone numbers are invalid")
    return contact