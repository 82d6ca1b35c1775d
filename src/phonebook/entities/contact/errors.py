"""Domain errors raised by the contact data layer."""


class ContactError(Exception):
    """Base class for contact domain errors."""

    def __init__(self, phone_number: str | None, message: str):
        super().__init__(message)
        self.phone_number = phone_number


class ContactNotFoundError(ContactError):
    """No contact exists for the given phone number."""

    def __init__(self, phone_number: str | None):
        super().__init__(phone_number, f"Contact not found for phone number {phone_number}")


class ContactAlreadyExistsError(ContactError):
    """A contact with the phone number is already stored."""

    def __init__(self, phone_number: str | None):
        super().__init__(
            phone_number, f"A contact with phone number {phone_number} already exists"
        )
