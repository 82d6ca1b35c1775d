"""Business rules for the contact directory."""

from loguru import logger

from src.phonebook.core.services.contacts.phone_validator import PhoneNumberValidator
from src.phonebook.entities.contact import Contact, ContactRepository, ContactUpdate


class ContactsService:
    """Gatekeeper between the HTTP layer and the contact repository.

    Holds no state beyond its collaborators, so a single instance is shared
    by all requests. Failures are logged with context and re-raised.
    """

    def __init__(
        self, repository: ContactRepository, phone_validator: PhoneNumberValidator
    ) -> None:
        self._repository = repository
        self._phone_validator = phone_validator

    def list_contacts(self, page: int, page_size: int) -> list[Contact]:
        try:
            return self._repository.list_contacts(page, page_size)
        except Exception:
            logger.exception(
                "Error getting contacts for page {} with page_size {}", page, page_size
            )
            raise

    def find_by_phone_number(self, phone_number: str) -> Contact | None:
        try:
            return self._repository.search_by_phone_number(phone_number)
        except Exception:
            logger.exception("Error searching contact by phone number {}", phone_number)
            raise

    def exists(self, phone_number: str) -> bool:
        """Whether a contact is stored for ``phone_number``.

        This is a plain read; a concurrent request may change the answer
        before the caller acts on it.
        """
        return self.find_by_phone_number(phone_number) is not None

    def create(self, contact: Contact) -> None:
        try:
            self._repository.create(contact)
        except Exception:
            logger.exception("Error creating contact: {}", contact)
            raise

    def update(self, contact: ContactUpdate, phone_number: str | None = None) -> Contact:
        try:
            return self._repository.update(contact, phone_number)
        except Exception:
            logger.exception(
                "Error updating contact {} with: {}",
                phone_number or contact.phone_number,
                contact,
            )
            raise

    def delete(self, phone_number: str) -> None:
        try:
            self._repository.delete(phone_number)
        except Exception:
            logger.exception("Error deleting contact with phone number: {}", phone_number)
            raise

    def is_valid_phone_number(self, phone_number: str | None) -> bool:
        return self._phone_validator.validate(phone_number)
