"""Contact database table model."""

from sqlmodel import Field

from src.phonebook.entities._base import EntityTable
from src.phonebook.entities.contact.entity import (
    ADDRESS_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    PHONE_NUMBER_MAX_LENGTH,
)


class ContactTable(EntityTable, table=True):
    """Database persistence model for contacts.

    The unique index on ``phone_number`` makes the store the final authority
    on duplicates; the service-level existence checks are only advisory.
    """

    __tablename__ = "contacts"

    first_name: str = Field(max_length=FIRST_NAME_MAX_LENGTH, nullable=False)
    last_name: str = Field(max_length=LAST_NAME_MAX_LENGTH, nullable=False)
    phone_number: str = Field(
        max_length=PHONE_NUMBER_MAX_LENGTH, nullable=False, unique=True, index=True
    )
    address: str | None = Field(default=None, max_length=ADDRESS_MAX_LENGTH)
