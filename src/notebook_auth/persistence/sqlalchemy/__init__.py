"""SQLAlchemy implementation for notebook_auth persistence.

Provides:
- AuthBase: Declarative base for auth models
- IdentityModel, RefreshTokenModel: SQLAlchemy models
- IdentityRepositorySQLAlchemy, RefreshTokenRepositorySQLAlchemy

Examples
--------
from notebook_auth.persistence.sqlalchemy import AuthBase
async with engine.begin() as conn:
    await conn.run_sync(AuthBase.metadata.create_all)
"""

from notebook_auth.persistence.sqlalchemy.base import AuthBase
from notebook_auth.persistence.sqlalchemy.models import (
    IdentityModel,
    RefreshTokenModel,
)
from notebook_auth.persistence.sqlalchemy.repositories import (
    IdentityRepositorySQLAlchemy,
    RefreshTokenRepositorySQLAlchemy,
)

__all__ = [
    "AuthBase",
    "IdentityModel",
    "IdentityRepositorySQLAlchemy",
    "RefreshTokenModel",
    "RefreshTokenRepositorySQLAlchemy",
]
