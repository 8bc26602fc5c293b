"""SQLAlchemy base configuration."""

from datetime import datetime

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from notebook.domain.shared.time import utc_now
from notebook_auth.persistence.sqlalchemy import AuthBase


class Base(DeclarativeBase):
    """Base class for all database models.

    Shares the identity tables' metadata so profiles can reference
    ``identities.id`` and ``create_all`` covers both packages.
    """

    metadata = AuthBase.metadata


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps (utc_now)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
