"""Abstract repository interface for identities.

This interface defines the contract for credential persistence.
Implementations can use SQLAlchemy or any other storage, as long as
they enforce uniqueness of ``normalized_email``.
"""

from abc import ABC, abstractmethod

from notebook_auth.schemas import IdentityData


class IdentityRepository(ABC):
    """Abstract repository interface for identity records."""

    @abstractmethod
    async def find_by_id(self, identity_id: str) -> IdentityData | None:
        """
        Find an identity by its id.

        Parameters
        ----------
        identity_id
            The identity's unique identifier

        Returns
        -------
        Identity data if found, None otherwise
        """

    @abstractmethod
    async def find_by_normalized_email(
        self,
        normalized_email: str,
    ) -> IdentityData | None:
        """
        Find an identity by its normalized (lower-cased) email.

        Parameters
        ----------
        normalized_email
            Email as produced by ``normalize_email``

        Returns
        -------
        Identity data if found, None otherwise
        """

    @abstractmethod
    async def add(self, identity: IdentityData) -> IdentityData:
        """
        Store a new identity.

        Parameters
        ----------
        identity
            The identity to persist

        Returns
        -------
        The stored identity data

        Raises
        ------
        DuplicateEmailError
            If another identity already owns the normalized email
        """
