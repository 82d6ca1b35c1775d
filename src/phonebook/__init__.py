"""Phonebook contacts API.

A REST service that stores contacts keyed by phone number, with paging,
search, partial updates and in-process request metrics.
"""

__version__ = "0.1.0"
