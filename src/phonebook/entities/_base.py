from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


def utc_now() -> datetime:
    return datetime.now(UTC)


class EntityTable(SQLModel, table=False):
    """Base persistence model with a surrogate key and audit timestamps.

    Timestamps are stamped by repositories, never by callers.
    """

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Surrogate identifier for the row",
    )

    created_date_utc: datetime = Field(default_factory=utc_now, nullable=False)
    update_date_utc: datetime = Field(default_factory=utc_now, nullable=False)
