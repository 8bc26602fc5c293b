"""SQLAlchemy models for the notebook backend.

Importing this package also registers the identity and refresh token
tables on the shared metadata.
"""

from notebook.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from notebook.infrastructure.persistence.sqlalchemy.models.user_profile_model import (  # NOQA: E501
    UserProfileModel,
)
from notebook_auth.persistence.sqlalchemy.models import (
    IdentityModel,
    RefreshTokenModel,
)

__all__ = [
    "Base",
    "IdentityModel",
    "RefreshTokenModel",
    "TimestampMixin",
    "UserProfileModel",
]
