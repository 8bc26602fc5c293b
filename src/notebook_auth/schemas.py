"""Auth schemas and data structures.

These are simple data classes used for transferring identity and token
data between components.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class IdentityData:
    """Credential-bearing account record held by the credential store.

    Attributes
    ----------
    id
        Opaque identity id (UUID string)
    email
        Email address as registered
    normalized_email
        Lower-cased email used for lookups and uniqueness
    password_hash
        bcrypt hash; never logged or rendered
    email_confirmed
        Whether the address counts as confirmed
    """

    id: str
    email: str
    normalized_email: str
    password_hash: str = field(repr=False)
    email_confirmed: bool
    created_at: datetime | None = None


@dataclass(frozen=True)
class TokenPayload:
    """Decoded and verified JWT token payload.

    Attributes
    ----------
    identity_id
        Value of the ``id`` claim
    subject
        Value of the ``sub`` claim (the email address)
    email
        Value of the ``email`` claim
    token_id
        Value of the ``jti`` claim
    issued_at
        Value of the ``iat`` claim
    expires_at
        Value of the ``exp`` claim
    """

    identity_id: str
    subject: str
    email: str
    token_id: UUID
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) >= self.expires_at


@dataclass(frozen=True)
class RefreshTokenData:
    """Refresh token record.

    Only storage and the active listing exist; nothing issues or
    consumes these records yet.
    """

    identity_id: str
    token: str
    jwt_id: str
    expires_at: datetime
    is_used: bool = False
    is_revoked: bool = False
    status: int = 1
    id: str | None = None
    created_at: datetime | None = None
