"""Pytest configuration shared by the whole suite."""

import os

# Must be set before any src.phonebook import reads config.yaml
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("PHONEBOOK_LOG_FILE", "")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

from tests.fixtures import *  # noqa: E402,F401,F403
