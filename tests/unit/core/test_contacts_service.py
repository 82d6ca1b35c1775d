"""Unit tests for ContactsService with a mocked repository."""

from unittest.mock import Mock

import pytest

from src.phonebook.core.services.contacts import ContactsService
from src.phonebook.entities.contact import (
    Contact,
    ContactNotFoundError,
    ContactRepository,
    ContactUpdate,
)

PHONE = "+972536260988"


@pytest.fixture
def mock_repository() -> Mock:
    return Mock(spec=ContactRepository)


@pytest.fixture
def mock_validator() -> Mock:
    validator = Mock()
    validator.validate.return_value = True
    return validator


@pytest.fixture
def service(mock_repository: Mock, mock_validator: Mock) -> ContactsService:
    return ContactsService(mock_repository, mock_validator)


@pytest.fixture
def contact() -> Contact:
    return Contact(first_name="John", last_name="Doe", phone_number=PHONE)


class TestContactsService:
    def test_list_contacts_delegates_to_repository(self, service, mock_repository, contact):
        mock_repository.list_contacts.return_value = [contact]

        result = service.list_contacts(2, 5)

        assert result == [contact]
        mock_repository.list_contacts.assert_called_once_with(2, 5)

    def test_list_contacts_logs_and_rethrows(self, service, mock_repository, log_messages):
        mock_repository.list_contacts.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError, match="db down"):
            service.list_contacts(1, 10)

        assert any("Error getting contacts for page 1" in m for m in log_messages)

    def test_find_by_phone_number(self, service, mock_repository, contact):
        mock_repository.search_by_phone_number.return_value = contact

        assert service.find_by_phone_number(PHONE) == contact
        mock_repository.search_by_phone_number.assert_called_once_with(PHONE)

    def test_exists_reflects_repository_lookup(self, service, mock_repository, contact):
        mock_repository.search_by_phone_number.return_value = contact
        assert service.exists(PHONE) is True

        mock_repository.search_by_phone_number.return_value = None
        assert service.exists(PHONE) is False

    def test_create_delegates_to_repository(self, service, mock_repository, contact):
        service.create(contact)

        mock_repository.create.assert_called_once_with(contact)

    def test_create_logs_and_rethrows(self, service, mock_repository, contact, log_messages):
        mock_repository.create.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            service.create(contact)

        assert any("Error creating contact" in m for m in log_messages)

    def test_update_passes_lookup_phone_number(self, service, mock_repository, contact):
        update = ContactUpdate(first_name="Jim")
        mock_repository.update.return_value = contact

        assert service.update(update, PHONE) == contact
        mock_repository.update.assert_called_once_with(update, PHONE)

    def test_update_rethrows_domain_errors(self, service, mock_repository):
        mock_repository.update.side_effect = ContactNotFoundError(PHONE)

        with pytest.raises(ContactNotFoundError):
            service.update(ContactUpdate(first_name="Jim"), PHONE)

    def test_delete_delegates_to_repository(self, service, mock_repository):
        service.delete(PHONE)

        mock_repository.delete.assert_called_once_with(PHONE)

    def test_delete_logs_and_rethrows(self, service, mock_repository, log_messages):
        mock_repository.delete.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            service.delete(PHONE)

        assert any("Error deleting contact" in m for m in log_messages)

    def test_is_valid_phone_number_uses_validator(self, service, mock_validator):
        mock_validator.validate.return_value = False

        assert service.is_valid_phone_number("nope") is False
        mock_validator.validate.assert_called_once_with("nope")
