"""SQLAlchemy models for notebook_auth."""

from notebook_auth.persistence.sqlalchemy.models.identity_model import IdentityModel
from notebook_auth.persistence.sqlalchemy.models.refresh_token_model import (
    RefreshTokenModel,
)

__all__ = ["IdentityModel", "RefreshTokenModel"]
