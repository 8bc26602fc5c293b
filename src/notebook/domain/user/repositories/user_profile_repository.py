"""User profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from notebook.domain.user.aggregates.user_profile import UserProfile


class UserProfileRepository(ABC):
    """Repository interface for UserProfile aggregates."""

    @abstractmethod
    async def add(self, profile: UserProfile) -> None:
        """Stage a new profile; persisted on the unit of work's commit."""

    @abstractmethod
    async def find_by_identity_id(self, identity_id: str) -> Optional[UserProfile]:
        """Find the profile linked to an identity."""
