"""Contact entity module.

This module contains all Contact-related classes organized by responsibility:
- Contact / ContactUpdate: Domain entities and the update merge rule
- ContactTable: Database persistence model
- ContactRepository: Data access layer
"""

from .entity import Contact, ContactUpdate, merge_contact
from .errors import ContactAlreadyExistsError, ContactError, ContactNotFoundError
from .repository import ContactRepository
from .table import ContactTable

__all__ = [
    "Contact",
    "ContactAlreadyExistsError",
    "ContactError",
    "ContactNotFoundError",
    "ContactRepository",
    "ContactTable",
    "ContactUpdate",
    "merge_contact",
]
