"""FastAPI dependency injection for the notebook API.

Provides dependencies for:
- Database sessions
- The account service (wired to one unit of work per request)
- The current identity (from the Bearer token)

Long-lived objects (settings, engine, session maker, token and password
services) are built once by ``create_app`` and kept on ``app.state``.
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from notebook.application.services import AccountService
from notebook.infrastructure.persistence.sqlalchemy import SQLAlchemyUnitOfWork
from notebook_auth import (
    IdentityManager,
    InvalidTokenError,
    PasswordHashingService,
    TokenPayload,
    TokenService,
)
from notebook_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_account_service(
    session: DBSession,
    token_service: TokenService = Depends(get_token_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AccountService:
    """
    Get the account service with all dependencies.

    The identity manager and the profile store share the request's unit
    of work, so registration commits both rows in one transaction.
    """
    uow = SQLAlchemyUnitOfWork(session)
    identity_manager = IdentityManager(uow.identities, password_service)

    return AccountService(
        identity_manager=identity_manager,
        unit_of_work=uow,
        token_service=token_service,
    )


# Type alias for injected account service
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    token_service: TokenService = Depends(get_token_service),
) -> TokenPayload:
    """
    Verified claims of the Bearer token on the request.

    Raises
    ------
    InvalidTokenError
        If the header is missing or the token fails verification; the
        exception handlers turn this into a 401 response
    """
    if credentials is None:
        msg = "Authentication required"
        raise InvalidTokenError(msg)

    payload = token_service.verify_token(credentials.credentials)
    logger.debug("Authenticated identity %s", payload.identity_id)
    return payload


# Type alias for injected current identity
CurrentIdentity = Annotated[TokenPayload, Depends(get_current_identity)]
