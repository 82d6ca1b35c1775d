"""Unit tests for the contact entity package."""

import pytest
from pydantic import ValidationError

from src.phonebook.entities.contact import (
    Contact,
    ContactAlreadyExistsError,
    ContactNotFoundError,
    ContactUpdate,
    merge_contact,
)


class TestContact:
    """Test the Contact domain entity."""

    def test_contact_creation(self):
        contact = Contact(
            first_name="John",
            last_name="Doe",
            phone_number="+972536260988",
            address="1 Main St",
        )

        assert contact.first_name == "John"
        assert contact.last_name == "Doe"
        assert contact.phone_number == "+972536260988"
        assert contact.address == "1 Main St"

    def test_address_is_optional(self):
        contact = Contact(first_name="John", last_name="Doe", phone_number="+972536260988")

        assert contact.address is None

    def test_whitespace_is_stripped(self):
        contact = Contact(first_name="  John ", last_name="Doe", phone_number=" +1 ")

        assert contact.first_name == "John"
        assert contact.phone_number == "+1"

    def test_field_lengths_are_enforced(self):
        with pytest.raises(ValidationError):
            Contact(first_name="J" * 101, last_name="Doe", phone_number="+1")
        with pytest.raises(ValidationError):
            Contact(first_name="John", last_name="Doe", phone_number="1" * 21)
        with pytest.raises(ValidationError):
            Contact(
                first_name="John",
                last_name="Doe",
                phone_number="+1",
                address="a" * 201,
            )

    def test_string_representation(self):
        contact = Contact(
            first_name="Jane", last_name="Smith", phone_number="+1", address="Elm St"
        )

        assert str(contact) == "Name: Jane Smith, Phone: +1, Address: Elm St"

    def test_string_representation_without_address(self):
        contact = Contact(first_name="Jane", last_name="Smith", phone_number="+1")

        assert str(contact) == "Name: Jane Smith, Phone: +1, Address: N/A"


class TestMergeContact:
    """Test the field-by-field update merge."""

    @pytest.fixture
    def current(self) -> Contact:
        return Contact(
            first_name="John",
            last_name="Doe",
            phone_number="+972536260988",
            address="Old",
        )

    def test_absent_and_blank_fields_keep_current_values(self, current):
        incoming = ContactUpdate(first_name="Johnny", last_name=None, address="  ")

        merged = merge_contact(current, incoming)

        assert merged == Contact(
            first_name="Johnny",
            last_name="Doe",
            phone_number="+972536260988",
            address="Old",
        )

    def test_every_field_can_be_replaced(self, current):
        incoming = ContactUpdate(
            first_name="Jane",
            last_name="Roe",
            phone_number="+16502530000",
            address="New",
        )

        merged = merge_contact(current, incoming)

        assert merged.model_dump() == incoming.model_dump()

    def test_empty_update_is_a_no_op(self, current):
        assert merge_contact(current, ContactUpdate()) == current

    def test_inputs_are_not_modified(self, current):
        incoming = ContactUpdate(first_name="Jane")
        before = current.model_copy()

        merge_contact(current, incoming)

        assert current == before
        assert incoming.last_name is None


class TestContactErrors:
    def test_not_found_error_carries_phone_number(self):
        error = ContactNotFoundError("+1")

        assert error.phone_number == "+1"
        assert "+1" in str(error)

    def test_already_exists_error_carries_phone_number(self):
        error = ContactAlreadyExistsError("+1")

        assert error.phone_number == "+1"
        assert "already exists" in str(error)
