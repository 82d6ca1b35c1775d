"""Wire representations of contacts (camelCase JSON)."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.phonebook.entities.contact import Contact, ContactUpdate
from src.phonebook.entities.contact.entity import (
    ADDRESS_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    PHONE_NUMBER_MAX_LENGTH,
)

_dto_config = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    str_strip_whitespace=True,
)


class ContactDto(BaseModel):
    """Full contact as sent on create and returned by reads."""

    model_config = _dto_config

    first_name: str = Field(min_length=1, max_length=FIRST_NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=LAST_NAME_MAX_LENGTH)
    phone_number: str = Field(min_length=1, max_length=PHONE_NUMBER_MAX_LENGTH)
    address: str | None = Field(default=None, max_length=ADDRESS_MAX_LENGTH)

    def to_entity(self) -> Contact:
        return Contact(**self.model_dump())

    @classmethod
    def from_entity(cls, contact: Contact) -> "ContactDto":
        return cls(**contact.model_dump())


class ContactUpdateDto(BaseModel):
    """Partial contact accepted by update; omitted fields keep their value."""

    model_config = _dto_config

    first_name: str | None = Field(default=None, max_length=FIRST_NAME_MAX_LENGTH)
    last_name: str | None = Field(default=None, max_length=LAST_NAME_MAX_LENGTH)
    phone_number: str | None = Field(default=None, max_length=PHONE_NUMBER_MAX_LENGTH)
    address: str | None = Field(default=None, max_length=ADDRESS_MAX_LENGTH)

    def to_entity(self) -> ContactUpdate:
        return ContactUpdate(**self.model_dump())
