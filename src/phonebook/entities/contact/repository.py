"""Contact data access layer."""

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.phonebook.core.services.database.db_session import DbSessionService
from src.phonebook.entities._base import utc_now
from src.phonebook.entities.contact.entity import Contact, ContactUpdate, merge_contact
from src.phonebook.entities.contact.errors import (
    ContactAlreadyExistsError,
    ContactNotFoundError,
)
from src.phonebook.entities.contact.table import ContactTable


class ContactRepository:
    """Sole reader and writer of the contacts table.

    Every operation opens its own session through ``session_scope`` so no
    session outlives a call or is shared between concurrent requests.
    """

    def __init__(self, db_service: DbSessionService) -> None:
        self._db = db_service

    @staticmethod
    def _to_entity(row: ContactTable) -> Contact:
        return Contact.model_validate(row, from_attributes=True)

    @staticmethod
    def _find_row(session: Session, phone_number: str) -> ContactTable | None:
        statement = select(ContactTable).where(ContactTable.phone_number == phone_number)
        return session.exec(statement).first()

    def list_contacts(self, page: int, page_size: int) -> list[Contact]:
        """Return one page of contacts ordered by first name."""
        try:
            with self._db.session_scope() as session:
                statement = (
                    select(ContactTable)
                    .order_by(ContactTable.first_name, ContactTable.id)
                    .offset((page - 1) * page_size)
                    .limit(page_size)
                )
                return [self._to_entity(row) for row in session.exec(statement).all()]
        except Exception:
            logger.exception(
                "Exception occurred during list_contacts for page: [{}] and page_size: [{}]",
                page,
                page_size,
            )
            raise

    def search_by_phone_number(self, phone_number: str) -> Contact | None:
        """Return the contact with ``phone_number`` or None."""
        try:
            with self._db.session_scope() as session:
                row = self._find_row(session, phone_number)
                if row is None:
                    logger.warning(
                        "search_by_phone_number didn't find the requested phone number {}",
                        phone_number,
                    )
                    return None
                return self._to_entity(row)
        except Exception:
            logger.exception(
                "Exception occurred during search_by_phone_number for phone_number: [{}]",
                phone_number,
            )
            raise

    def create(self, contact: Contact) -> None:
        """Insert a new row. Duplicate checks are the caller's job; the unique index backs them up."""
        try:
            with self._db.session_scope() as session:
                now = utc_now()
                row = ContactTable(
                    **contact.model_dump(),
                    created_date_utc=now,
                    update_date_utc=now,
                )
                session.add(row)
        except IntegrityError as e:
            logger.warning("create: phone number {} is already stored", contact.phone_number)
            raise ContactAlreadyExistsError(contact.phone_number) from e
        except Exception:
            logger.exception("create: Failed to create contact for Contact: {}", contact)
            raise

    def update(self, contact: ContactUpdate, phone_number: str | None = None) -> Contact:
        """Merge ``contact`` into the stored row addressed by ``phone_number``.

        Without an explicit ``phone_number`` the row is looked up by
        ``contact.phone_number``. Returns the merged contact.
        """
        lookup = phone_number or contact.phone_number
        merged: Contact | None = None
        try:
            with self._db.session_scope() as session:
                row = self._find_row(session, lookup) if lookup else None
                if row is not None:
                    merged = merge_contact(self._to_entity(row), contact)
                    for field, value in merged.model_dump().items():
                        setattr(row, field, value)
                    row.update_date_utc = utc_now()
                    session.add(row)

            if merged is None:
                logger.warning("update: Contact not found for phone_number: [{}]", lookup)
                raise ContactNotFoundError(lookup)
            return merged
        except ContactNotFoundError:
            raise
        except IntegrityError as e:
            logger.warning(
                "update: phone number {} is already stored", contact.phone_number
            )
            raise ContactAlreadyExistsError(contact.phone_number) from e
        except Exception:
            logger.exception("update: Failed to update contact for ContactUpdate: {}", contact)
            raise

    def delete(self, phone_number: str) -> None:
        """Hard delete the contact with ``phone_number``."""
        try:
            with self._db.session_scope() as session:
                row = self._find_row(session, phone_number)
                if row is not None:
                    session.delete(row)

            if row is None:
                logger.warning("delete: contact not found with phone_number: [{}]", phone_number)
                raise ContactNotFoundError(phone_number)
        except ContactNotFoundError:
            raise
        except Exception:
            logger.exception(
                "delete: Failed to delete contact with phone_number: [{}]", phone_number
            )
            raise

    def save(self) -> None:
        """Flush and commit whatever a fresh session has pending."""
        try:
            with self._db.session_scope():
                pass
        except Exception:
            logger.exception("save: Failed to save changes to the store.")
            raise
