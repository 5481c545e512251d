from datetime import UTC, datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, comment="Time the row was created."
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
        comment="Time the row was last updated.",
    )


class AuditMixin(TimestampMixin):
    created_by: Mapped[None | int] = mapped_column(Integer, nullable=True, comment="ID of the creating user.")
    updated_by: Mapped[None | int] = mapped_column(Integer, nullable=True, comment="ID of the last updating user.")


class HashIdMixin:
    """
    Declares the persisted opaque identifier column. The value is written once,
    right after the first insert, by HashIdService.materialize.
    """

    hashid: Mapped[None | str] = mapped_column(
        String(32),
        nullable=True,
        unique=True,
        index=True,
        comment="Public opaque identifier derived from the primary key; written once after creation.",
    )
