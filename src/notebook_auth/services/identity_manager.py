"""Identity manager: the credential store used by the account service.

Combines an ``IdentityRepository`` with the ``PasswordHashingService`` to
look identities up by email, create them under the password policy, and
check passwords.
"""

import logging
from uuid import uuid4

from notebook.domain.shared.time import utc_now
from notebook_auth.exceptions import CredentialCreationError
from notebook_auth.repositories import IdentityRepository
from notebook_auth.schemas import IdentityData
from notebook_auth.services.password_service import PasswordHashingService

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Lookup/uniqueness form of an email address."""
    return email.strip().lower()


class IdentityManager:
    """Credential store facade over identity persistence and bcrypt."""

    def __init__(
        self,
        identity_repository: IdentityRepository,
        password_service: PasswordHashingService,
    ):
        self._identity_repo = identity_repository
        self._password_service = password_service

    async def find_by_email(self, email: str) -> IdentityData | None:
        return await self._identity_repo.find_by_normalized_email(
            normalize_email(email),
        )

    async def create(
        self,
        email: str,
        password: str,
        *,
        email_confirmed: bool = False,
    ) -> IdentityData:
        """Create a new identity with a hashed password.

        Raises
        ------
        CredentialCreationError
            If the password violates the policy; ``reasons`` lists every
            violated rule
        DuplicateEmailError
            If the storage layer already holds the normalized email
        """
        reasons = self._password_service.validate(password)
        if reasons:
            logger.info("Identity creation rejected by password policy")
            raise CredentialCreationError(reasons)

        identity = IdentityData(
            id=str(uuid4()),
            email=email.strip(),
            normalized_email=normalize_email(email),
            password_hash=self._password_service.hash(password),
            email_confirmed=email_confirmed,
            created_at=utc_now(),
        )
        stored = await self._identity_repo.add(identity)
        logger.info("Created identity %s", stored.id)
        return stored

    def check_password(self, identity: IdentityData, password: str) -> bool:
        return self._password_service.verify(password, identity.password_hash)
