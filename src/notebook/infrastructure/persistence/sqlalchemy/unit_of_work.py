"""SQLAlchemy unit of work over a single AsyncSession."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from notebook.application.ports import UnitOfWork
from notebook.infrastructure.persistence.sqlalchemy.repositories import (
    UserProfileRepositorySQLAlchemy,
)
from notebook_auth.persistence.sqlalchemy import (
    IdentityRepositorySQLAlchemy,
    RefreshTokenRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)


class SQLAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of the UnitOfWork port.

    Every repository handed out shares ``session``, so identity and
    profile writes land in one transaction that ``commit`` ends.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

        # Cached instances (created on demand)
        self._identity_repo: IdentityRepositorySQLAlchemy | None = None
        self._user_repo: UserProfileRepositorySQLAlchemy | None = None
        self._refresh_token_repo: RefreshTokenRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def identities(self) -> IdentityRepositorySQLAlchemy:
        if self._identity_repo is None:
            self._identity_repo = IdentityRepositorySQLAlchemy(self._session)
        return self._identity_repo

    @property
    def users(self) -> UserProfileRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserProfileRepositorySQLAlchemy(self._session)
        return self._user_repo

    @property
    def refresh_tokens(self) -> RefreshTokenRepositorySQLAlchemy:
        if self._refresh_token_repo is None:
            self._refresh_token_repo = RefreshTokenRepositorySQLAlchemy(
                self._session,
            )
        return self._refresh_token_repo

    async def commit(self) -> None:
        await self._session.commit()
        logger.debug("Unit of work committed")

    async def rollback(self) -> None:
        await self._session.rollback()
        logger.debug("Unit of work rolled back")
