"""Password hashing service using bcrypt.

Provides secure password hashing and verification plus the password
policy applied when a new identity is created.
"""

from dataclasses import dataclass

import bcrypt

# bcrypt only looks at the first 72 bytes of its input
_BCRYPT_MAX_BYTES = 72


@dataclass(frozen=True)
class PasswordPolicy:
    """Rules a new password must satisfy."""

    min_length: int = 6
    require_digit: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_non_alphanumeric: bool = True

    def violations(self, password: str) -> list[str]:
        """Return every rule the password breaks, in a stable order."""
        reasons: list[str] = []

        if len(password) < self.min_length:
            reasons.append(
                f"Passwords must be at least {self.min_length} characters.",
            )
        if self.require_non_alphanumeric and all(c.isalnum() for c in password):
            reasons.append(
                "Passwords must have at least one non alphanumeric character.",
            )
        if self.require_digit and not any(c.isdigit() for c in password):
            reasons.append("Passwords must have at least one digit ('0'-'9').")
        if self.require_lowercase and not any(c.islower() for c in password):
            reasons.append(
                "Passwords must have at least one lowercase ('a'-'z').",
            )
        if self.require_uppercase and not any(c.isupper() for c in password):
            reasons.append(
                "Passwords must have at least one uppercase ('A'-'Z').",
            )

        return reasons


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("My_secure_passw0rd")
    >>> service.verify("My_secure_passw0rd", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    def __init__(self, rounds: int = 12, policy: PasswordPolicy | None = None):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12.
        policy
            Rules checked by ``validate``; defaults to ``PasswordPolicy()``
        """
        self._rounds = rounds
        self._policy = policy or PasswordPolicy()

    @property
    def policy(self) -> PasswordPolicy:
        return self._policy

    def validate(self, password: str) -> list[str]:
        """Check a candidate password against the policy.

        Returns
        -------
        The list of violated rules; empty when the password is acceptable
        """
        reasons = self._policy.violations(password)
        if len(password.encode("utf-8")) > _BCRYPT_MAX_BYTES:
            reasons.append(
                f"Passwords cannot exceed {_BCRYPT_MAX_BYTES} bytes.",
            )
        return reasons

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash as a string
        """
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except (ValueError, TypeError):
            # Invalid hash format or over-long input
            return False
