"""Process configuration held in a ContextVar so tests and tools can layer overrides."""

import os
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel

from src.phonebook.runtime.config.config_data import ConfigData
from src.phonebook.runtime.config.config_template import load_templated_yaml


@dataclass(frozen=True)
class AppContext:
    config: ConfigData


def load_default_config() -> ConfigData:
    """Load config.yaml, or the file named by PHONEBOOK_CONFIG.

    A missing file yields the model defaults so the package imports from any
    working directory.
    """
    path = Path(os.getenv("PHONEBOOK_CONFIG", "config.yaml"))
    if not path.exists():
        logger.warning("Configuration file {} not found; using defaults", path)
        return ConfigData()
    return load_templated_yaml(path)


_current: ContextVar[AppContext] = ContextVar(
    "phonebook_context", default=AppContext(config=load_default_config())
)


def get_context() -> AppContext:
    return _current.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _current.set(context)


def get_config() -> ConfigData:
    return get_context().config


def set_config(config: ConfigData) -> None:
    """Replace the configuration for the rest of the current context."""
    set_context(replace(get_context(), config=config))


def _explicit_values(model: BaseModel) -> dict[str, Any]:
    """Values the caller actually assigned, descending into nested sections.

    A section assigned as a whole counts in full even if none of its own
    fields were touched.
    """
    values: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_values(value)
            if nested:
                values[name] = nested
            elif name in model.model_fields_set:
                values[name] = value.model_dump()
        elif name in model.model_fields_set:
            values[name] = value
    return values


def _deep_update(target: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(target)
    for key, value in updates.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_update(current, value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Apply the explicitly set parts of ``config_override`` inside the block.

    Anything the override leaves at its default is inherited from the
    enclosing configuration::

        override = ConfigData()
        override.contacts.max_page_size = 25
        with with_context(override):
            assert get_config().contacts.max_page_size == 25
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(f"Expected ConfigData or None, got {type(config_override)}")

    merged = ConfigData.model_validate(
        _deep_update(get_config().model_dump(), _explicit_values(config_override))
    )
    token = set_context(replace(get_context(), config=merged))
    try:
        yield
    finally:
        _current.reset(token)
