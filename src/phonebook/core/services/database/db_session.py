"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, StaticPool, text
from sqlmodel import Session, create_engine

from src.phonebook.runtime.config.config_data import ConfigData
from src.phonebook.runtime.context import get_config


def _is_in_memory_sqlite(url: str) -> bool:
    return ":memory:" in url or url.rstrip("/") == "sqlite:"


def engine_options(config: ConfigData) -> dict[str, Any]:
    """Keyword arguments for ``create_engine`` matching the configured backend."""
    db = config.database
    options: dict[str, Any] = {"echo": db.echo, "pool_pre_ping": True}

    if not db.is_sqlite:
        options.update(
            pool_size=db.pool_size,
            max_overflow=db.max_overflow,
            pool_timeout=db.pool_timeout,
            pool_recycle=db.pool_recycle,
        )
        if db.url.startswith("postgresql"):
            options["connect_args"] = {
                "application_name": f"{config.app.name}_{config.app.environment}",
                "connect_timeout": 30,
            }
        return options

    if config.app.environment == "production":
        logger.warning("SQLite backs the contact store in production; prefer PostgreSQL")

    # Request handlers run in the threadpool, so connections cross threads
    options["connect_args"] = {"check_same_thread": False, "timeout": 20}
    if _is_in_memory_sqlite(db.url):
        # Each pooled connection would otherwise open its own empty database
        options["poolclass"] = StaticPool
    return options


class DbSessionService:
    """Owns the shared engine and hands out short-lived sessions."""

    def __init__(self, engine: Engine | None = None):
        if engine is None:
            config = get_config()
            logger.info(
                "Creating database engine for {} ({} backend)",
                config.app.environment,
                "sqlite" if config.database.is_sqlite else "server",
            )
            engine = create_engine(
                config.database.connection_string, **engine_options(config)
            )
        self._engine = engine

    @property
    def engine(self) -> Engine:
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        # Entities are read after the session closes
        return Session(self._engine, expire_on_commit=False)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Yield a session, commit on success, roll back on error, always close."""
        session = self.get_session()
        try:
            yield session
            session.commit()
        except Exception as e:
            session.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        """Run ``SELECT 1``; False when the database cannot be reached."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False
        return True

    def get_pool_status(self) -> dict[str, Any]:
        """Pool counters for the readiness endpoint; zero where the pool has none."""
        pool = self._engine.pool
        counters = {
            "size": "size",
            "checked_in": "checkedin",
            "checked_out": "checkedout",
            "overflow": "overflow",
        }
        return {
            key: getattr(pool, method)() if hasattr(pool, method) else 0
            for key, method in counters.items()
        }
