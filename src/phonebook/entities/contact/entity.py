"""Contact domain entities."""

from pydantic import BaseModel, ConfigDict, Field

FIRST_NAME_MAX_LENGTH = 100
LAST_NAME_MAX_LENGTH = 100
PHONE_NUMBER_MAX_LENGTH = 20
ADDRESS_MAX_LENGTH = 200


class Contact(BaseModel):
    """A contact in the directory.

    ``phone_number`` is the business key: lookups, updates and deletes all
    address a contact through it.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str = Field(max_length=FIRST_NAME_MAX_LENGTH, description="First name")
    last_name: str = Field(max_length=LAST_NAME_MAX_LENGTH, description="Last name")
    phone_number: str = Field(
        max_length=PHONE_NUMBER_MAX_LENGTH, description="Phone number, unique per contact"
    )
    address: str | None = Field(
        default=None, max_length=ADDRESS_MAX_LENGTH, description="Postal address"
    )

    def __str__(self) -> str:
        return (
            f"Name: {self.first_name} {self.last_name}, "
            f"Phone: {self.phone_number}, Address: {self.address or 'N/A'}"
        )


class ContactUpdate(BaseModel):
    """Partial contact used as the incoming side of an update.

    Fields left as ``None`` (or blank) keep the persisted value.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    first_name: str | None = Field(default=None, max_length=FIRST_NAME_MAX_LENGTH)
    last_name: str | None = Field(default=None, max_length=LAST_NAME_MAX_LENGTH)
    phone_number: str | None = Field(default=None, max_length=PHONE_NUMBER_MAX_LENGTH)
    address: str | None = Field(default=None, max_length=ADDRESS_MAX_LENGTH)

    def __str__(self) -> str:
        return (
            f"Name: {self.first_name} {self.last_name}, "
            f"Phone: {self.phone_number}, Address: {self.address or 'N/A'}"
        )


def _is_absent(value: str | None) -> bool:
    return value is None or not value.strip()


def merge_contact(current: Contact, incoming: ContactUpdate) -> Contact:
    """Merge ``incoming`` over ``current`` field by field.

    Every field follows the same rule: an absent or blank incoming value
    keeps the current one. Neither argument is modified.
    """
    merged = {
        name: getattr(current, name)
        if _is_absent(getattr(incoming, name))
        else getattr(incoming, name)
        for name in Contact.model_fields
    }
    return Contact(**merged)
