"""Phone number grammar validation."""

from typing import Any, Protocol

import phonenumbers


class PhoneNumberValidator(Protocol):
    """Reports whether a string is a structurally valid phone number."""

    def validate(self, phone_number: Any) -> bool: ...


class LibPhoneNumberValidator:
    """Validator backed by the ``phonenumbers`` port of libphonenumber.

    With no default region, numbers must be self-describing, i.e. carry a
    leading ``+country code``.
    """

    def __init__(self, default_region: str | None = None) -> None:
        self._default_region = default_region

    def validate(self, phone_number: Any) -> bool:
        if not isinstance(phone_number, str) or not phone_number.strip():
            return False
        try:
            parsed = phonenumbers.parse(phone_number.strip(), self._default_region)
        except phonenumbers.NumberParseException:
            return False
        return phonenumbers.is_valid_number(parsed)
