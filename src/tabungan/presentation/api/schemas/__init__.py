"""Pydantic schemas for API request/response models."""

from tabungan.presentation.api.schemas.auth import (
    AuthResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)
from tabungan.presentation.api.schemas.banking import (
    BalanceAdjustRequest,
    BalanceResponse,
    BankAccountOpenRequest,
    BankAccountOpenResponse,
    BankCredentialsRequest,
)
from tabungan.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from tabungan.presentation.api.schemas.users import (
    ChangePasswordRequest,
    UserCreateRequest,
    UserListResponse,
    UserUpdateRequest,
)

__all__ = [
    "AuthResponse",
    "BalanceAdjustRequest",
    "BalanceResponse",
    "BankAccountOpenRequest",
    "BankAccountOpenResponse",
    "BankCredentialsRequest",
    "ChangePasswordRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
]
