import pytest
from pydantic import ValidationError

from contactbook.models import Contact

from .conftest import make_contact


def test_contact_fields_in_column_order(juan):
    assert juan.fields() == [
        "Juan Dela Cruz",
        "09244561530",
        "juan@email.com",
        "123 Main St, Manila",
        "15/03/1990",
    ]


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "J"),
        ("phone", "12345"),
        ("email", "not-an-email"),
        ("address", "abc"),
        ("birthdate", "1990-03-15"),
    ],
)
def test_invalid_field_rejected_on_create(field, value):
    with pytest.raises(ValidationError):
        make_contact(**{field: value})


def test_invalid_assignment_rejected(juan):
    with pytest.raises(ValidationError):
        juan.phone = "0924"
    assert juan.phone == "09244561530"


def test_error_message_is_field_specific():
    with pytest.raises(ValidationError) as exc_info:
        make_contact(email="juan")
    assert "Invalid email format" in str(exc_info.value)


def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        Contact(
            name="Juan Dela Cruz",
            phone="09244561530",
            email="juan@email.com",
            address="123 Main St, Manila",
            birthdate="15/03/1990",
            nickname="JD",
        )
