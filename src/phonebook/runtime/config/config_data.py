"""Typed view of the ``config:`` section of config.yaml."""

from __future__ import annotations

import os
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, computed_field
from sqlalchemy.engine import make_url


class CORSConfig(BaseModel):
    """Browser origins allowed to call the API."""

    origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default_factory=lambda: ["*"])


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Minimum level for every sink")
    format: Literal["json", "plain"] = Field(
        default="plain", description="Layout of the file sink"
    )
    file: str | None = Field(
        default="logs/phonebook.log",
        description="Rotating log file; empty disables the file sink",
    )
    max_size_mb: int = Field(default=10, description="Rotate the file at this size")
    backup_count: int = Field(default=5, description="Rotated files kept")


class DatabaseConfig(BaseModel):
    """Contact store connection settings.

    Pool settings apply to server databases only; SQLite ignores them.
    """

    url: str = Field(default="sqlite:///./phonebook.db", description="SQLAlchemy URL")
    echo: bool = Field(default=False, description="Log every SQL statement")
    create_tables: bool = Field(
        default=True, description="Create missing tables when the API starts"
    )
    pool_size: int = Field(default=20)
    max_overflow: int = Field(default=10)
    pool_timeout: int = Field(default=30, description="Seconds to wait for a connection")
    pool_recycle: int = Field(default=1800, description="Seconds before a connection is replaced")
    password_env_var: str | None = Field(
        default=None, description="Name of the variable holding the password"
    )
    password_file: str | None = Field(
        default=None, description="Mounted secret file holding the password"
    )

    @computed_field
    @property
    def password(self) -> str | None:
        """Secret file first, then the named variable, then the URL itself."""
        if self.password_file:
            try:
                with open(self.password_file) as f:
                    return f.read().strip()
            except OSError as e:
                raise ValueError(
                    f"Cannot read database password file {self.password_file}"
                ) from e
        if self.password_env_var:
            secret = os.getenv(self.password_env_var)
            if not secret:
                raise ValueError(f"Environment variable {self.password_env_var} not set")
            return secret
        return make_url(self.url).password

    @computed_field
    @property
    def connection_string(self) -> str:
        """The URL with the resolved password filled in."""
        url = make_url(self.url)
        if self.is_sqlite:
            return self.url

        secret = self.password
        if url.password and secret != url.password:
            logger.warning("Database URL password overridden by the configured secret")
        if secret:
            url = url.set(password=secret)
        # str(url) would mask the password
        return url.render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return make_url(self.url).drivername.startswith("sqlite")


class ContactsConfig(BaseModel):
    """Contact directory behaviour."""

    default_page_size: int = Field(
        default=10, ge=1, description="Page size used when the client sends none"
    )
    max_page_size: int = Field(
        default=10, ge=1, description="Largest page size a client may request"
    )
    phone_default_region: str | None = Field(
        default=None,
        description="Region assumed for numbers without a leading +country code",
    )


class AppConfig(BaseModel):
    name: str = Field(default="phonebook", description="Reported by /health")
    environment: Literal["development", "production", "test"] = "development"
    host: str = Field(default="localhost", description="Bind address for serve")
    port: int = Field(default=8000, description="Bind port for serve")
    cors: CORSConfig = Field(default_factory=CORSConfig)


class ConfigData(BaseModel):
    """Root of config.yaml; every section falls back to its defaults."""

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    contacts: ContactsConfig = Field(default_factory=ContactsConfig)
