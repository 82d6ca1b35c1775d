"""Entities organised by business concept.

Each entity package colocates its domain model (entity.py), persistence
model (table.py) and data access layer (repository.py).
"""

from .contact import Contact, ContactRepository, ContactTable, ContactUpdate

__all__ = [
    "Contact",
    "ContactRepository",
    "ContactTable",
    "ContactUpdate",
]
