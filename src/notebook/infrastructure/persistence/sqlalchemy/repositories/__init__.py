"""SQLAlchemy repository implementations for the notebook backend."""

from notebook.infrastructure.persistence.sqlalchemy.repositories.user_profile_repository import (  # NOQA: E501
    UserProfileRepositorySQLAlchemy,
)

__all__ = ["UserProfileRepositorySQLAlchemy"]
