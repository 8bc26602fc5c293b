"""Account service for registration, login and the current profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from notebook.domain.user import UserProfile, UserProfileNotFoundError
from notebook_auth import (
    DuplicateEmailError,
    IdentityManager,
    InvalidAuthenticationError,
    TokenPayload,
    TokenService,
)

if TYPE_CHECKING:
    from notebook.application.ports import UnitOfWork

logger = logging.getLogger(__name__)


class AccountService:
    """
    Application service for account registration and login.

    Bridges the credential store (``IdentityManager``), the user profile
    store and the ``TokenService``. Registration writes the identity and
    its profile through one unit of work: both rows commit together or
    neither does.
    """

    def __init__(
        self,
        identity_manager: IdentityManager,
        unit_of_work: UnitOfWork,
        token_service: TokenService,
    ):
        self._identity_manager = identity_manager
        self._uow = unit_of_work
        self._token_service = token_service

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> str:
        """Create an identity plus profile and return a signed token.

        Raises
        ------
        DuplicateEmailError
            If the email already has an identity
        CredentialCreationError
            If the credential store rejects the password
        """
        existing = await self._identity_manager.find_by_email(email)
        if existing is not None:
            raise DuplicateEmailError(email)

        try:
            identity = await self._identity_manager.create(
                email,
                password,
                email_confirmed=True,
            )
            profile = UserProfile.create(
                identity_id=identity.id,
                first_name=first_name,
                last_name=last_name,
                email=identity.email,
            )
            await self._uow.users.add(profile)
            await self._uow.commit()
        except Exception:
            await self._uow.rollback()
            raise

        logger.info("Account registered: identity %s", identity.id)
        return self._token_service.issue_token(identity)

    async def login(self, email: str, password: str) -> str:
        identity = await self._identity_manager.find_by_email(email)
        if identity is None:
            logger.info("Login rejected: unknown email")
            raise InvalidAuthenticationError

        if not self._identity_manager.check_password(identity, password):
            logger.info("Login rejected: wrong password for %s", identity.id)
            raise InvalidAuthenticationError

        logger.info("Identity logged in: %s", identity.id)
        return self._token_service.issue_token(identity)

    def verify_token(self, token: str) -> TokenPayload:
        return self._token_service.verify_token(token)

    async def get_profile(self, identity_id: str) -> UserProfile:
        profile = await self._uow.users.find_by_identity_id(identity_id)
        if profile is None:
            raise UserProfileNotFoundError(identity_id)
        return profile
