"""SQLAlchemy repository implementations for notebook_auth."""

from notebook_auth.persistence.sqlalchemy.repositories.identity_repository import (
    IdentityRepositorySQLAlchemy,
)
from notebook_auth.persistence.sqlalchemy.repositories.refresh_token_repository import (  # noqa: E501
    RefreshTokenRepositorySQLAlchemy,
)

__all__ = ["IdentityRepositorySQLAlchemy", "RefreshTokenRepositorySQLAlchemy"]
