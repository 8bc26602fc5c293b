from notebook.presentation.api.schemas.accounts import (
    AuthResult,
    LoginRequest,
    ProfileResponse,
    RegistrationRequest,
)

__all__ = [
    "AuthResult",
    "LoginRequest",
    "ProfileResponse",
    "RegistrationRequest",
]
