"""SQLAlchemy implementation of UserProfileRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notebook.domain.shared.time import ensure_tz_aware
from notebook.domain.user import UserProfile, UserProfileRepository
from notebook.infrastructure.persistence.sqlalchemy.models import UserProfileModel

logger = logging.getLogger(__name__)


class UserProfileRepositorySQLAlchemy(UserProfileRepository):
    """SQLAlchemy implementation of the UserProfileRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, profile: UserProfile) -> None:
        self._session.add(self._map_to_model(profile))
        await self._session.flush()
        logger.debug("Staged user profile %s", profile.id)

    async def find_by_identity_id(self, identity_id: str) -> Optional[UserProfile]:
        stmt = select(UserProfileModel).where(
            UserProfileModel.identity_id == identity_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    def _map_to_model(self, profile: UserProfile) -> UserProfileModel:
        return UserProfileModel(
            id=profile.id,
            identity_id=profile.identity_id,
            first_name=profile.first_name,
            last_name=profile.last_name,
            email=profile.email,
            phone=profile.phone,
            country=profile.country,
            date_of_birth=profile.date_of_birth,
            status=int(profile.status),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def _map_to_domain(self, model: UserProfileModel) -> UserProfile:
        return UserProfile.reconstitute(
            id=model.id,
            identity_id=model.identity_id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            phone=model.phone,
            country=model.country,
            date_of_birth=ensure_tz_aware(model.date_of_birth),
            status=model.status,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )
