"""Authentication services.

Provides password hashing, the identity manager, and JWT token handling.
"""

from notebook_auth.services.identity_manager import IdentityManager, normalize_email
from notebook_auth.services.password_service import (
    PasswordHashingService,
    PasswordPolicy,
)
from notebook_auth.services.token_service import JwtConfig, TokenService

__all__ = [
    "IdentityManager",
    "JwtConfig",
    "PasswordHashingService",
    "PasswordPolicy",
    "TokenService",
    "normalize_email",
]
