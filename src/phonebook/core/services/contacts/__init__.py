from .contacts_service import ContactsService
from .phone_validator import LibPhoneNumberValidator, PhoneNumberValidator

__all__ = ["ContactsService", "LibPhoneNumberValidator", "PhoneNumberValidator"]
