"""Authentication schemas for request/response models."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (8-128 characters)",
    )
    password_confirm: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Anna",
                "email": "anna@example.com",
                "password": "securepassword123",
                "password_confirm": "securepassword123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "anna@example.com",
                "password": "securepassword123",
            },
        },
    )


class UserResponse(BaseModel):
    """Public user data. Never includes the password hash."""

    id: UUID
    name: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Response schema for registration: user plus session token."""

    user: UserResponse
    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")


class LoginResponse(AuthResponse):
    """Response schema for login."""

    login_attempts: int = Field(
        ...,
        description="Failed attempts recorded before this successful login",
    )
