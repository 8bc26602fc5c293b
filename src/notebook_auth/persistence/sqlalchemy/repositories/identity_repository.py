"""SQLAlchemy implementation of IdentityRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from notebook.domain.shared.time import ensure_tz_aware
from notebook_auth.exceptions import DuplicateEmailError
from notebook_auth.persistence.sqlalchemy.models import IdentityModel
from notebook_auth.repositories import IdentityRepository
from notebook_auth.schemas import IdentityData

logger = logging.getLogger(__name__)


class IdentityRepositorySQLAlchemy(IdentityRepository):
    """
    SQLAlchemy implementation of IdentityRepository.

    Writes are flushed, never committed: the caller's unit of work decides
    when the transaction ends.
    """

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Parameters
        ----------
        session
            SQLAlchemy async session
        """
        self._session = session

    def _to_data(self, model: IdentityModel) -> IdentityData:
        """Map SQLAlchemy model to the identity data transfer object."""
        return IdentityData(
            id=model.id,
            email=model.email,
            normalized_email=model.normalized_email,
            password_hash=model.password_hash,
            email_confirmed=model.email_confirmed,
            created_at=ensure_tz_aware(model.created_at),
        )

    async def find_by_id(self, identity_id: str) -> IdentityData | None:
        stmt = select(IdentityModel).where(IdentityModel.id == identity_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_data(model) if model else None

    async def find_by_normalized_email(
        self,
        normalized_email: str,
    ) -> IdentityData | None:
        stmt = select(IdentityModel).where(
            IdentityModel.normalized_email == normalized_email,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_data(model) if model else None

    async def add(self, identity: IdentityData) -> IdentityData:
        model = IdentityModel(
            id=identity.id,
            email=identity.email,
            normalized_email=identity.normalized_email,
            password_hash=identity.password_hash,
            email_confirmed=identity.email_confirmed,
        )
        if identity.created_at is not None:
            model.created_at = identity.created_at
            model.updated_at = identity.created_at

        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            if "unique" in str(e).lower():
                logger.warning(
                    "Identity insert hit the email uniqueness constraint",
                )
                raise DuplicateEmailError(identity.email) from e
            raise

        logger.debug("Inserted identity: %s", model.id)
        return self._to_data(model)
