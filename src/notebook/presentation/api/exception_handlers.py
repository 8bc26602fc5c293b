"""Centralized exception handlers for the FastAPI application.

Every failure leaves the API in the same envelope the account endpoints
use on success:

    {
        "success": false,
        "errors": ["Human-readable message", ...]
    }

Usage:
    from notebook.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notebook.domain.user import UserProfileNotFoundError
from notebook_auth import AuthError, InvalidTokenError, PayloadValidationError

logger = logging.getLogger(__name__)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"
INTERNAL_ERROR_MESSAGE = "An internal error occurred"


def _create_error_response(
    status_code: int,
    errors: list[str],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "errors": errors,
        },
        headers=headers,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Malformed bodies collapse to a single generic message."""
        logger.info(
            "Rejected payload on %s %s: %d validation error(s)",
            request.method,
            request.url.path,
            len(exc.errors()),
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=PayloadValidationError().errors,
        )

    @app.exception_handler(InvalidTokenError)
    async def invalid_token_handler(
        request: Request,
        exc: InvalidTokenError,
    ) -> JSONResponse:
        logger.warning(
            "Token rejected on %s %s: %s",
            request.method,
            request.url.path,
            exc.message,
        )
        return _create_error_response(
            status_code=status.HTTP_401_UNAUTHORIZED,
            errors=[INVALID_TOKEN_MESSAGE],
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle registration and login failures.

        The client receives ``exc.errors`` verbatim; these never carry
        passwords or hashes.
        """
        logger.info(
            "%s on %s %s",
            type(exc).__name__,
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            errors=exc.errors,
        )

    @app.exception_handler(UserProfileNotFoundError)
    async def profile_not_found_handler(
        request: Request,
        exc: UserProfileNotFoundError,
    ) -> JSONResponse:
        logger.warning(
            "No profile for identity %s on %s %s",
            exc.identity_id,
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_404_NOT_FOUND,
            errors=["User profile not found"],
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the handlers above.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            errors=[INTERNAL_ERROR_MESSAGE],
        )
