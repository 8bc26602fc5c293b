"""SQLAlchemy implementation of RefreshTokenRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from notebook.domain.shared.time import ensure_tz_aware
from notebook_auth.persistence.sqlalchemy.models import RefreshTokenModel
from notebook_auth.repositories import RefreshTokenRepository
from notebook_auth.schemas import RefreshTokenData

logger = logging.getLogger(__name__)

ACTIVE_STATUS = 1


class RefreshTokenRepositorySQLAlchemy(RefreshTokenRepository):
    """SQLAlchemy implementation of the RefreshTokenRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, refresh_token: RefreshTokenData) -> RefreshTokenData:
        model = RefreshTokenModel(
            identity_id=refresh_token.identity_id,
            token=refresh_token.token,
            jwt_id=refresh_token.jwt_id,
            is_used=refresh_token.is_used,
            is_revoked=refresh_token.is_revoked,
            expires_at=refresh_token.expires_at,
            status=refresh_token.status,
        )
        if refresh_token.id is not None:
            model.id = refresh_token.id

        self._session.add(model)
        await self._session.flush()
        logger.debug("Stored refresh token %s", model.id)
        return self._map_to_data(model)

    async def list_active(self) -> list[RefreshTokenData]:
        stmt = (
            select(RefreshTokenModel)
            .where(RefreshTokenModel.status == ACTIVE_STATUS)
            .order_by(RefreshTokenModel.created_at)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_data(model) for model in result.scalars().all()]

    def _map_to_data(self, model: RefreshTokenModel) -> RefreshTokenData:
        return RefreshTokenData(
            id=model.id,
            identity_id=model.identity_id,
            token=model.token,
            jwt_id=model.jwt_id,
            is_used=model.is_used,
            is_revoked=model.is_revoked,
            expires_at=ensure_tz_aware(model.expires_at),
            status=model.status,
            created_at=ensure_tz_aware(model.created_at),
        )
