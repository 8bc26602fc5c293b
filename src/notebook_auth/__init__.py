"""Notebook Auth - authentication infrastructure.

This package handles everything credential-related and is independent of
the notebook domain model:
- Password hashing and policy (bcrypt)
- Identity storage and lookup (the credential store)
- JWT token issuance and verification

Architecture:
    notebook_auth/
    ├── services/           # Pure logic (password hashing, identities, JWT)
    ├── repositories/       # Abstract interfaces
    ├── persistence/        # Implementations by technology
    │   └── sqlalchemy/     # SQLAlchemy implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from notebook_auth import JwtConfig, TokenService

    from notebook_auth.persistence.sqlalchemy import (
        AuthBase,
        IdentityRepositorySQLAlchemy,
    )
"""

from notebook_auth.exceptions import (
    AuthError,
    ConfigurationError,
    CredentialCreationError,
    DuplicateEmailError,
    InvalidAuthenticationError,
    InvalidTokenError,
    PayloadValidationError,
    TokenExpiredError,
)
from notebook_auth.repositories import IdentityRepository, RefreshTokenRepository
from notebook_auth.schemas import IdentityData, RefreshTokenData, TokenPayload
from notebook_auth.services import (
    IdentityManager,
    JwtConfig,
    PasswordHashingService,
    PasswordPolicy,
    TokenService,
)

__all__ = [
    # Services
    "IdentityManager",
    "JwtConfig",
    "PasswordHashingService",
    "PasswordPolicy",
    "TokenService",
    # Repositories (interfaces)
    "IdentityRepository",
    "RefreshTokenRepository",
    # Schemas
    "IdentityData",
    "RefreshTokenData",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "ConfigurationError",
    "CredentialCreationError",
    "DuplicateEmailError",
    "InvalidAuthenticationError",
    "InvalidTokenError",
    "PayloadValidationError",
    "TokenExpiredError",
]
