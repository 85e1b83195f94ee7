from datetime import date

import pytest

from contactbook.book import Column, ContactBook
from contactbook.contact import Contact, ValidationError


def make_contact(**overrides):
    values = dict(
        first_name="Ivan",
        last_name="Petrov",
        middle_name="Sergeevich",
        address="Main St",
        birth_date=date(1990, 2, 1),
        email="ivan@example.com",
        phone_numbers=["12"],
    )
    values.update(overrides)
    return Contact(**values)


@pytest.fixture
def book():
    result = ContactBook()
    result.add(make_contact())
    result.add(make_contact(first_name="Anna", last_name="Smirnova", email="anna@example.com",
                            birth_date=date(1985, 7, 3), phone_numbers=["34", "56"]))
    result.add(make_contact(first_name="Boris", last_name="Kuznetsov", email="boris@example.com",
                            address="Oak Rd"))
    return result


def test_len_iter_getitem(book):
    assert len(book) == 3
    assert [c.first_name for c in book] == ["Ivan", "Anna", "Boris"]
    assert book[1].last_name == "Smirnova"


def test_add_appends(book):
    contact = make_contact(first_name="Olga")
    book.add(contact)
    assert book[len(book) - 1] is contact


def test_delete(book):
    removed = book.delete(0)
    assert removed.first_name == "Ivan"
    assert [c.first_name for c in book] == ["Anna", "Boris"]


@pytest.mark.parametrize("index", [-1, 3])
def test_delete_out_of_range(book, index):
    with pytest.raises(IndexError):
        book.delete(index)
    assert len(book) == 3


def test_clear(book):
    book.clear()
    assert len(book) == 0
    assert list(book) == []


def test_edit_name_trims(book):
    book.edit(0, Column.FIRST_NAME, "  Pavel ")
    assert book[0].first_name == "Pavel"


@pytest.mark.parametrize(
    "column, text, attribute",
    [
        (Column.FIRST_NAME, "pavel", "first_name"),
        (Column.LAST_NAME, "X", "last_name"),
        (Column.MIDDLE_NAME, "Ivan0vich", "middle_name"),
        (Column.BIRTH_DATE, "32.01.2000", "birth_date"),
        (Column.EMAIL, "not-an-email", "email"),
        (Column.PHONE_NUMBERS, "abc", "phone_numbers"),
    ],
)
def test_edit_invalid_keeps_value(book, column, text, attribute):
    before = getattr(book[0], attribute)
    with pytest.raises(ValidationError):
        book.edit(0, column, text)
    assert getattr(book[0], attribute) == before


def test_edit_address_accepts_anything(book):
    book.edit(1, Column.ADDRESS, "  Elm St 5  ")
    assert book[1].address == "Elm St 5"


def test_edit_birth_date(book):
    book.edit(0, int(Column.BIRTH_DATE), "15.03.1970")
    assert book[0].birth_date == date(1970, 3, 15)


def test_edit_email(book):
    book.edit(2, Column.EMAIL, " new@example.com ")
    assert book[2].email == "new@example.com"


def test_edit_phones_sanitized(book):
    book.edit(0, Column.PHONE_NUMBERS, "+7 (12) 34, 56")
    assert book[0].phone_numbers == ["+71234", "56"]


def test_edit_missing_row(book):
    with pytest.raises(IndexError):
        book.edit(10, Column.ADDRESS, "x")


def test_search_case_insensitive(book):
    assert [c.first_name for c in book.search("ANNA")] == ["Anna"]


def test_search_empty_returns_all(book):
    assert book.search("") == list(book)


def test_search_no_match(book):
    assert book.search("zzz") == []


def test_search_matches_formatted_date(book):
    assert [c.first_name for c in book.search("07.1985")] == ["Anna"]


def test_search_matches_phone(book):
    assert [c.first_name for c in book.search("56")] == ["Anna"]


def test_search_results_contain_text(book):
    for contact in book.search("example"):
        assert "example" in contact.email


def test_sort_by_last_name(book):
    book.sort_by(Column.LAST_NAME)
    names = [c.last_name for c in book]
    assert names == sorted(names)
    assert len(names) == 3


def test_sort_by_first_name(book):
    book.sort_by(0)
    assert [c.first_name for c in book] == ["Anna", "Boris", "Ivan"]


def test_sort_is_stable(book):
    book.sort_by(Column.MIDDLE_NAME)
    assert [c.first_name for c in book] == ["Ivan", "Anna", "Boris"]