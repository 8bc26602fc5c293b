"""Authentication exceptions.

These exceptions are raised by the notebook_auth package and the account
service. Per-request errors are turned into ``{"success": false,
"errors": [...]}`` bodies by the API exception handlers;
``ConfigurationError`` is raised while the application is being built.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)

    @property
    def errors(self) -> list[str]:
        """Client-facing error messages."""
        return [self.message]


class ConfigurationError(AuthError):
    """Raised when the token signing configuration is unusable.

    Fatal: the hosting process must not start with a bad signing setup.
    """

    def __init__(self, message: str = "JWT signing secret is not configured"):
        super().__init__(message)


class PayloadValidationError(AuthError):
    """Raised when a request body fails shape validation."""

    def __init__(self, message: str = "Invalid payload"):
        super().__init__(message)


class DuplicateEmailError(AuthError):
    """Raised when registering an email that already has an identity."""

    def __init__(self, email: str | None = None, message: str = "Email already in use"):
        self.email = email
        super().__init__(message)


class CredentialCreationError(AuthError):
    """Raised when the credential store refuses to create an identity.

    ``reasons`` holds every rejection reason, passed through verbatim.
    """

    def __init__(self, reasons: list[str]):
        self.reasons = list(reasons) or ["Identity could not be created"]
        super().__init__("; ".join(self.reasons))

    @property
    def errors(self) -> list[str]:
        return list(self.reasons)


class InvalidAuthenticationError(AuthError):
    """Raised when email or password is wrong during login.

    Unknown email and wrong password share this message.
    """

    def __init__(self, message: str = "Invalid authentication request"):
        super().__init__(message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class TokenExpiredError(InvalidTokenError):
    """Raised when a JWT token's ``exp`` claim is in the past."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)
