"""Authentication router for registration, login and the current user."""

import logging

from fastapi import APIRouter, HTTPException, status

from tabungan.domain.user import PasswordConfirmationMismatchError, User
from tabungan.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
    SettingsDep,
    UserRepo,
)
from tabungan.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)
from tabungan.presentation.api.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Passwords differ or too weak"},
        403: {"description": "Registration disabled"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    user_repo: UserRepo,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    # Check registration mode (first user is always allowed)
    if settings.registration_mode == "admin_only" and await user_repo.count() > 0:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Registration is disabled. Contact an administrator.",
        )
    if request.password != request.password_confirm:
        raise PasswordConfirmationMismatchError

    try:
        user, access_token = await auth_service.register(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return AuthResponse(
        user=_user_response(user),
        access_token=access_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"model": ErrorResponse, "description": "Wrong email or password"},
        403: {"model": ErrorResponse, "description": "Too many failed attempts"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> LoginResponse:
    """
    Authenticate with email and password.

    After repeated failures the email is locked out for a while; during
    the lockout even the right password is refused.
    """
    result = await auth_service.login(
        email=request.email,
        password=request.password,
    )

    return LoginResponse(
        user=_user_response(result.user),
        access_token=result.access_token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
        login_attempts=result.login_attempts,
    )


@router.get(
    "/me",
    summary="Get current user",
    responses={
        200: {"description": "Current user data"},
        401: {"description": "Not authenticated"},
    },
)
async def get_me(user: CurrentUser) -> UserResponse:
    return _user_response(user)
