"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notebook.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)
from notebook.presentation.api.exception_handlers import setup_exception_handlers
from notebook.presentation.api.routers import accounts_router
from notebook_auth import (
    JwtConfig,
    PasswordHashingService,
    PasswordPolicy,
    TokenService,
)
from notebook_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Console output with timestamps and module names; the configured level
    for notebook modules and WARNING for noisy third-party libraries.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("notebook").setLevel(log_level)
    logging.getLogger("notebook_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Accounts",
        "description": """Account registration and login.

- Register with email, password, first and last name
- Login to obtain a JWT (HS256, valid for 3 hours)
- Inspect the authenticated account's profile
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting notebook API v%s...", API_VERSION)
    engine = app.state.engine
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down notebook API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_token_service(settings: Settings) -> TokenService:
    """Build the token service; raises ConfigurationError on a bad setup."""
    config = JwtConfig(
        secret=settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )
    return TokenService(config)


def create_password_service(settings: Settings) -> PasswordHashingService:
    policy = PasswordPolicy(
        min_length=settings.password_min_length,
        require_digit=settings.password_require_digit,
        require_lowercase=settings.password_require_lowercase,
        require_uppercase=settings.password_require_uppercase,
        require_non_alphanumeric=settings.password_require_non_alphanumeric,
    )
    return PasswordHashingService(rounds=settings.bcrypt_rounds, policy=policy)


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(accounts_router, prefix="/accounts", tags=["Accounts"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.

    Raises
    ------
    ConfigurationError
        If the JWT signing configuration is unusable; the process must not
        start serving in that case.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    token_service = create_token_service(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Account registration, login and JWT issuance.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    engine = create_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = create_session_maker(engine)
    app.state.token_service = token_service
    app.state.password_service = create_password_service(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint (unversioned)."""
        return {
            "status": "healthy",
            "version": API_VERSION,
        }

    return app
