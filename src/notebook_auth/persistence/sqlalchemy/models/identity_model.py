"""SQLAlchemy model for identities (email + password hash)."""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from notebook.domain.shared.time import utc_now
from notebook_auth.persistence.sqlalchemy.base import AuthBase


class IdentityModel(AuthBase):
    """
    SQLAlchemy model for credential-bearing identities.

    ``normalized_email`` carries the UNIQUE constraint that guarantees one
    identity per address even when two registrations race past the
    application-level existence check.

    Table: identities
    """

    __tablename__ = "identities"

    id: Mapped[str] = mapped_column(
        String(36),  # UUID string format
        primary_key=True,
        default=lambda: str(uuid4()),
    )

    email: Mapped[str] = mapped_column(String(256), nullable=False)
    normalized_email: Mapped[str] = mapped_column(
        String(256),
        unique=True,
        nullable=False,
        index=True,
    )

    # Password hash (bcrypt format, ~60 chars)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    email_confirmed: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
    )

    def __repr__(self) -> str:
        return f"<IdentityModel(id={self.id}, email={self.email})>"
