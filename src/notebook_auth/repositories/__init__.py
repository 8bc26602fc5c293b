"""Repository interfaces for notebook_auth.

This package defines abstract repository interfaces that can be implemented
by different persistence technologies. The SQLAlchemy implementations live
in ``notebook_auth.persistence.sqlalchemy``.
"""

from notebook_auth.repositories.identity_repository import IdentityRepository
from notebook_auth.repositories.refresh_token_repository import (
    RefreshTokenRepository,
)

__all__ = ["IdentityRepository", "RefreshTokenRepository"]
