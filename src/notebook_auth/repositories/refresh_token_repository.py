"""Abstract repository interface for refresh tokens."""

from abc import ABC, abstractmethod

from notebook_auth.schemas import RefreshTokenData


class RefreshTokenRepository(ABC):
    """Abstract repository interface for refresh token records."""

    @abstractmethod
    async def add(self, refresh_token: RefreshTokenData) -> RefreshTokenData:
        """Store a refresh token record and return it with its id."""

    @abstractmethod
    async def list_active(self) -> list[RefreshTokenData]:
        """List refresh tokens whose status is active, oldest first."""
