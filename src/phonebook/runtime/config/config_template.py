"""Environment-variable templating for config.yaml."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from src.phonebook.runtime.config.config_data import ConfigData

# ${NAME}, ${NAME:-default} or ${NAME:?message}
_PLACEHOLDER = re.compile(r"\$\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?:(?P<op>:[-?])(?P<arg>[^}]*))?\}")


def _resolve(match: re.Match[str]) -> str:
    name, op, arg = match.group("name", "op", "arg")
    value = os.getenv(name)
    if op == ":-":
        return arg if value is None else value
    if value is not None:
        return value
    if op == ":?":
        raise ValueError(f"Required environment variable {name}: {arg}")
    raise ValueError(f"Required environment variable {name} not set")


def substitute_env_vars(text: str) -> str:
    """Replace ``${...}`` placeholders with environment values.

    ``${NAME}`` and ``${NAME:?message}`` are required and raise ValueError
    when unset; ``${NAME:-default}`` falls back to ``default``.
    """
    return _PLACEHOLDER.sub(_resolve, text)


def apply_environment_overrides(env_mode: str) -> None:
    """Copy ``<ENV>_NAME`` variables onto ``NAME`` for the active environment."""
    prefix = f"{env_mode.upper()}_"
    for name, value in list(os.environ.items()):
        if name.startswith(prefix) and len(name) > len(prefix):
            os.environ[name.removeprefix(prefix)] = value
            logger.debug("{} overridden from {}", name.removeprefix(prefix), name)


def _substitute_tree(node: Any) -> Any:
    """Substitute placeholders in every string scalar of a parsed document.

    A scalar that is exactly one placeholder resolving to an empty string
    becomes None, the same as an empty YAML value.
    """
    if isinstance(node, dict):
        return {key: _substitute_tree(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_substitute_tree(item) for item in node]
    if isinstance(node, str):
        value = substitute_env_vars(node)
        if value == "" and _PLACEHOLDER.fullmatch(node.strip()):
            return None
        return value
    return node


def load_templated_yaml(file_path: Path) -> ConfigData:
    """Parse ``file_path``, substitute variables and validate its ``config:`` section.

    Substitution happens after parsing, so values containing YAML syntax
    such as ``sqlite:///:memory:`` are taken literally.
    Raises ValueError for missing variables, malformed YAML or invalid values.
    """
    env_mode = os.getenv("APP_ENVIRONMENT", "development")
    logger.info("Loading {} for environment {}", file_path, env_mode)
    apply_environment_overrides(env_mode)

    raw = Path(file_path).read_text()
    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ValueError(f"Malformed YAML in {file_path}: {e}") from e
    if not isinstance(document, dict):
        raise ValueError(f"{file_path} does not contain a mapping")

    try:
        return ConfigData.model_validate(_substitute_tree(document.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {file_path}: {e}") from e
