"""Unit of work port."""

from abc import ABC, abstractmethod

from notebook.domain.user import UserProfileRepository
from notebook_auth.repositories import IdentityRepository, RefreshTokenRepository


class UnitOfWork(ABC):
    """Transaction boundary over the notebook repositories.

    Writes staged through the repositories become durable only on
    ``commit``; ``rollback`` discards everything staged since the last
    commit.
    """

    @property
    @abstractmethod
    def identities(self) -> IdentityRepository:
        """Identity repository bound to this unit of work."""

    @property
    @abstractmethod
    def users(self) -> UserProfileRepository:
        """User profile repository bound to this unit of work."""

    @property
    @abstractmethod
    def refresh_tokens(self) -> RefreshTokenRepository:
        """Refresh token repository bound to this unit of work."""

    @abstractmethod
    async def commit(self) -> None:
        """Persist all staged changes atomically."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discard all staged changes."""
