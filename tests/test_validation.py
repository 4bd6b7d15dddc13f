import pytest

from contactbook.validation import (
    FIELD_NAMES,
    get_rule,
    is_valid_address,
    is_valid_birthdate,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
)


@pytest.mark.parametrize("name", ["Jo", "Juan Dela Cruz", "Peña", "A" * 100])
def test_valid_names(name):
    assert is_valid_name(name)


@pytest.mark.parametrize("name", ["", "J", "A" * 101, "Juan2", "O'Brien", "Anne-Marie"])
def test_invalid_names(name):
    assert not is_valid_name(name)


@pytest.mark.parametrize("phone", ["09244561530", "09000000000", "09999999999"])
def test_valid_phones(phone):
    assert is_valid_phone(phone)


@pytest.mark.parametrize(
    "phone",
    ["", "0924456153", "092445615301", "19244561530", "08244561530", "0924456153a", "+639244561530"],
)
def test_invalid_phones(phone):
    assert not is_valid_phone(phone)


@pytest.mark.parametrize("email", ["juan@email.com", "a.b+tag@sub.domain.ph", "x_y%z@host.io"])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["", "juan", "juan@email", "juan@email.c", "@email.com", "juan @email.com", "juan@email.com "])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_address_length_bounds():
    assert not is_valid_address("1234")
    assert is_valid_address("12345")
    assert is_valid_address("x" * 100)
    assert not is_valid_address("x" * 101)


@pytest.mark.parametrize("date", ["15/03/1990", "01/01/1900", "31/12/2025", "31/02/2000"])
def test_valid_birthdates(date):
    assert is_valid_birthdate(date)


@pytest.mark.parametrize(
    "date",
    [
        "",
        "1/3/1990",
        "15-03-1990",
        "00/03/1990",
        "32/03/1990",
        "15/00/1990",
        "15/13/1990",
        "15/03/1899",
        "15/03/2026",
        "15/03/1990x",
    ],
)
def test_invalid_birthdates(date):
    assert not is_valid_birthdate(date)


def test_birthdate_has_no_leap_year_check():
    # Known looseness: only ranges are checked
    assert is_valid_birthdate("29/02/2021")


def test_rules_cover_every_field():
    assert FIELD_NAMES == ["name", "phone", "email", "address", "birthdate"]
    assert get_rule("phone").predicate("09244561530")
    with pytest.raises(KeyError):
        get_rule("nickname")
