"""JWT token service.

Issues and verifies the signed bearer tokens handed out after a
successful registration or login.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import jwt

from notebook.domain.shared.time import utc_now
from notebook_auth.exceptions import (
    ConfigurationError,
    InvalidTokenError,
    TokenExpiredError,
)
from notebook_auth.schemas import IdentityData, TokenPayload

# Minimum key length per HMAC algorithm (RFC 7518, section 3.2)
_MIN_SECRET_BYTES = {
    "HS256": 32,
    "HS384": 48,
    "HS512": 64,
}


@dataclass(frozen=True)
class JwtConfig:
    """Immutable token signing configuration.

    Built once at startup from ``Settings.jwt_secret`` and
    ``Settings.jwt_algorithm``.
    """

    secret: str
    algorithm: str = "HS256"

    def __repr__(self) -> str:
        return f"JwtConfig(secret=***, algorithm={self.algorithm!r})"


class TokenService:
    """Service for JWT token creation and verification.

    Tokens carry ``id``, ``sub``, ``email``, ``jti``, ``iat``, ``nbf`` and
    ``exp`` claims and are signed with a symmetric HMAC key. A token is
    valid iff its signature verifies under the same secret and algorithm
    and the current time is before ``exp``.

    Examples
    --------
    >>> service = TokenService(JwtConfig(secret="x" * 32))
    >>> token = service.issue_token(identity)
    >>> payload = service.verify_token(token)
    >>> print(payload.email)
    """

    TOKEN_LIFETIME = timedelta(hours=3)

    def __init__(
        self,
        config: JwtConfig,
        clock: Callable[[], datetime] = utc_now,
    ):
        """Initialize the token service.

        Parameters
        ----------
        config
            Signing configuration. Must name an HMAC algorithm and carry a
            secret at least as long as that algorithm's digest.
        clock
            Source of the issuance time (UTC, timezone-aware)

        Raises
        ------
        ConfigurationError
            If the secret is missing or too short, or the algorithm is not
            an HMAC-SHA algorithm
        """
        if not config.secret:
            msg = "JWT signing secret is not configured"
            raise ConfigurationError(msg)

        min_bytes = _MIN_SECRET_BYTES.get(config.algorithm)
        if min_bytes is None:
            msg = (
                f"Unsupported JWT algorithm {config.algorithm!r}; "
                f"expected one of {', '.join(_MIN_SECRET_BYTES)}"
            )
            raise ConfigurationError(msg)

        if len(config.secret.encode("utf-8")) < min_bytes:
            msg = (
                f"JWT signing secret must be at least {min_bytes} bytes "
                f"for {config.algorithm}"
            )
            raise ConfigurationError(msg)

        self._config = config
        self._clock = clock

    @property
    def algorithm(self) -> str:
        return self._config.algorithm

    def issue_token(self, identity: IdentityData) -> str:
        """Create a signed token for an already authenticated identity.

        Parameters
        ----------
        identity
            The identity the token is issued for. No credential check is
            performed here.

        Returns
        -------
        The compact encoded JWT string
        """
        now = self._clock()
        payload = {
            "id": identity.id,
            "sub": identity.email,
            "email": identity.email,
            "jti": str(uuid4()),
            "iat": now,
            "nbf": now,
            "exp": now + self.TOKEN_LIFETIME,
        }

        return jwt.encode(
            payload,
            self._config.secret,
            algorithm=self._config.algorithm,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded claims

        Raises
        ------
        TokenExpiredError
            If the token's expiry has passed
        InvalidTokenError
            If the token is invalid, tampered with, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._config.secret,
                algorithms=[self._config.algorithm],
                options={"require": ["exp", "iat", "sub", "jti"]},
            )

            return TokenPayload(
                identity_id=str(payload["id"]),
                subject=payload["sub"],
                email=payload["email"],
                token_id=UUID(payload["jti"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
