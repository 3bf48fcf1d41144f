"""User management schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from tabungan.presentation.api.schemas.auth import UserResponse


class UserCreateRequest(BaseModel):
    """Request schema for creating a user."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    password_confirm: str


class UserUpdateRequest(BaseModel):
    """Request schema for replacing a user's name and email."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr


class ChangePasswordRequest(BaseModel):
    """Request schema for changing a user's password."""

    password_old: str
    password_new: str = Field(..., min_length=8, max_length=128)
    password_confirm: str


class UserListResponse(BaseModel):
    """One page of users."""

    page_number: int
    page_size: int
    count: int = Field(..., description="Users on this page")
    total_pages: int
    has_previous_page: bool
    has_next_page: bool
    data: list[UserResponse]

    model_config = ConfigDict(from_attributes=True)
