"""User domain: the profile record linked one-to-one to an identity."""

from notebook.domain.user.aggregates import UserProfile
from notebook.domain.user.exceptions import UserProfileNotFoundError
from notebook.domain.user.repositories import UserProfileRepository
from notebook.domain.user.value_objects import EntityStatus

__all__ = [
    "EntityStatus",
    "UserProfile",
    "UserProfileNotFoundError",
    "UserProfileRepository",
]
