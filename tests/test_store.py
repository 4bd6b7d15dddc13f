import pytest
from pydantic import ValidationError

from contactbook.exceptions import ContactBookError, ContactNotFoundError, EmptySearchTermError
from contactbook.store import ContactStore

from .conftest import make_contact


def test_add_preserves_insertion_order(juan, maria):
    store = ContactStore()
    assert store.is_empty()

    store.add(maria)
    store.add(juan)

    assert len(store) == 2
    assert store.all() == [maria, juan]
    assert list(store) == [maria, juan]


def test_duplicates_allowed_and_first_match_wins(juan):
    twin = make_contact(phone="09170000000")
    store = ContactStore([juan, twin])

    assert store.find_by_name("Juan Dela Cruz") is juan

    store.delete("Juan Dela Cruz")
    assert store.all() == [twin]


def test_find_by_name_is_exact_and_case_sensitive(store, juan):
    assert store.find_by_name("Juan Dela Cruz") is juan
    assert store.find_by_name("juan dela cruz") is None
    assert store.find_by_name("Juan") is None


def test_delete_returns_removed_contact(store, juan, maria):
    removed = store.delete("Juan Dela Cruz")
    assert removed is juan
    assert store.all() == [maria]


def test_delete_missing_name_leaves_store_unchanged(store):
    before = store.all()
    with pytest.raises(ContactNotFoundError) as exc_info:
        store.delete("Pedro Penduko")
    assert exc_info.value.name == "Pedro Penduko"
    assert isinstance(exc_info.value, ContactBookError)
    assert store.all() == before


def test_search_scenario(juan):
    store = ContactStore([juan])
    assert store.search("manila") == [juan]
    assert store.search("MANILA") == [juan]
    assert store.search("MaNiLa") == [juan]
    assert store.search("xyz") == []


@pytest.mark.parametrize(
    "term",
    ["Dela", "0924456", "@email.", "Main St", "03/1990", "1530", "j", "juan@email.com"],
)
def test_search_finds_substring_of_any_field(juan, maria, term):
    store = ContactStore([maria, juan])
    assert juan in store.search(term)


def test_search_keeps_store_order(store, juan, maria):
    assert store.search("a") == [juan, maria]


def test_search_does_not_match_formatted_phone(store):
    assert store.search("+63") == []


def test_search_rejects_empty_term(store):
    with pytest.raises(EmptySearchTermError):
        store.search("")


def test_update_applies_supplied_fields_only(store, juan):
    updated = store.update("Juan Dela Cruz", phone="09998887777", email=None, address="")

    assert updated is juan
    assert juan.phone == "09998887777"
    assert juan.email == "juan@email.com"
    assert juan.address == "123 Main St, Manila"


def test_update_with_all_empty_fields_changes_nothing(store, juan):
    before = juan.model_dump()
    store.update("Juan Dela Cruz", name="", phone="", email="", address="", birthdate="")
    assert juan.model_dump() == before


def test_update_can_rename(store, juan):
    store.update("Juan Dela Cruz", name="Juan Luna")
    assert store.find_by_name("Juan Luna") is juan
    assert store.find_by_name("Juan Dela Cruz") is None


def test_update_invalid_value_applies_nothing(store, juan):
    before = juan.model_dump()
    with pytest.raises(ValidationError):
        store.update("Juan Dela Cruz", name="Juan Luna", birthdate="31/13/1990")
    assert juan.model_dump() == before


def test_update_missing_contact(store):
    with pytest.raises(ContactNotFoundError):
        store.update("Pedro Penduko", phone="09998887777")


def test_update_unknown_field(store):
    with pytest.raises(ValueError, match="nickname"):
        store.update("Juan Dela Cruz", nickname="JD")
