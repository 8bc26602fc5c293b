"""Accounts router for registration, login and the current profile."""

import logging

from fastapi import APIRouter, status

from notebook.presentation.api.dependencies import AccountServiceDep, CurrentIdentity
from notebook.presentation.api.schemas.accounts import (
    AuthResult,
    LoginRequest,
    ProfileResponse,
    RegistrationRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_AUTH_RESPONSES = {
    200: {"description": "Token issued"},
    400: {"description": "Invalid payload or rejected credentials"},
}


@router.post(
    "/register",
    response_model=AuthResult,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Register a new account",
    responses=_AUTH_RESPONSES,
)
@router.post(
    "/Register",
    response_model=AuthResult,
    response_model_exclude_none=True,
    include_in_schema=False,
)
async def register(
    request: RegistrationRequest,
    account_service: AccountServiceDep,
) -> AuthResult:
    """Create an identity and its profile, then return a signed token."""
    token = await account_service.register(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    return AuthResult(success=True, token=token)


@router.post(
    "/login",
    response_model=AuthResult,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
    summary="Log in with email and password",
    responses=_AUTH_RESPONSES,
)
@router.post(
    "/Login",
    response_model=AuthResult,
    response_model_exclude_none=True,
    include_in_schema=False,
)
async def login(
    request: LoginRequest,
    account_service: AccountServiceDep,
) -> AuthResult:
    token = await account_service.login(
        email=request.email,
        password=request.password,
    )
    return AuthResult(success=True, token=token)


@router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Profile of the authenticated account",
    responses={401: {"description": "Missing, invalid or expired token"}},
)
async def me(
    identity: CurrentIdentity,
    account_service: AccountServiceDep,
) -> ProfileResponse:
    profile = await account_service.get_profile(identity.identity_id)
    return ProfileResponse(
        id=profile.id,
        identity_id=profile.identity_id,
        first_name=profile.first_name,
        last_name=profile.last_name,
        email=profile.email,
        phone=profile.phone,
        country=profile.country,
        date_of_birth=profile.date_of_birth,
        status=int(profile.status),
        created_at=profile.created_at,
    )
