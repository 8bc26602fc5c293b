"""Account schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegistrationRequest(BaseModel):
    """Request schema for account registration."""

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., description="Password checked against the policy")
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePassword123!",
                "firstName": "Ada",
                "lastName": "Lovelace",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePassword123!",
            },
        },
    )


class AuthResult(BaseModel):
    """Outcome of a registration or login attempt.

    Exactly one of ``token`` and ``errors`` is set.
    """

    success: bool
    token: str | None = None
    errors: list[str] | None = None


class ProfileResponse(BaseModel):
    """Response schema for the authenticated account's profile."""

    id: UUID
    identity_id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    country: str
    date_of_birth: datetime
    status: int
    created_at: datetime
