"""Users router for account management endpoints."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, status

from tabungan.application.commands.user import (
    ChangePasswordCommand,
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from tabungan.application.queries.user import GetUserQuery, ListUsersQuery
from tabungan.domain.user import User
from tabungan.presentation.api.dependencies import DBSession, PasswordService, UserRepo
from tabungan.presentation.api.schemas.auth import UserResponse
from tabungan.presentation.api.schemas.common import ErrorResponse
from tabungan.presentation.api.schemas.users import (
    ChangePasswordRequest,
    UserCreateRequest,
    UserListResponse,
    UserUpdateRequest,
)

router = APIRouter()

# Type aliases for query parameters using Annotated (modern FastAPI pattern)
PageNumber = Annotated[int, Query(ge=1, description="Page number, starting at 1")]
PageSize = Annotated[int, Query(ge=1, le=100, description="Users per page")]
SearchExpr = Annotated[
    str | None,
    Query(description="field:substring, e.g. name:an (fields: id, name, email)"),
]
SortExpr = Annotated[
    str | None,
    Query(description="field:asc or field:desc, e.g. email:desc"),
]

NOT_FOUND_RESPONSE = {"model": ErrorResponse, "description": "Unknown user"}


def _user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, name=user.name, email=user.email)


@router.get(
    "",
    summary="List users",
    responses={
        200: {"description": "One page of users"},
        400: {"model": ErrorResponse, "description": "Invalid sort or search"},
    },
)
async def list_users(
    user_repo: UserRepo,
    page_number: PageNumber = 1,
    page_size: PageSize = 10,
    search: SearchExpr = None,
    sort: SortExpr = None,
) -> UserListResponse:
    """
    List users, filtered, then sorted, then paginated.

    Page counts describe the filtered set.
    """
    page = await ListUsersQuery(user_repo).execute(
        page_number=page_number,
        page_size=page_size,
        search=search,
        sort=sort,
    )

    return UserListResponse(
        page_number=page.page_number,
        page_size=page.page_size,
        count=page.count,
        total_pages=page.total_pages,
        has_previous_page=page.has_previous_page,
        has_next_page=page.has_next_page,
        data=[
            UserResponse(id=item.id, name=item.name, email=item.email)
            for item in page.data
        ],
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={
        201: {"description": "User created"},
        400: {"model": ErrorResponse, "description": "Passwords differ"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def create_user(
    request: UserCreateRequest,
    user_repo: UserRepo,
    password_service: PasswordService,
    session: DBSession,
) -> UserResponse:
    command = CreateUserCommand(user_repo, password_service)
    try:
        user = await command.execute(
            name=request.name,
            email=request.email,
            password=request.password,
            password_confirm=request.password_confirm,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        # Let the global exception handler process domain exceptions
        raise

    return _user_response(user)


@router.get(
    "/{user_id}",
    summary="Get user",
    responses={422: NOT_FOUND_RESPONSE},
)
async def get_user(user_id: UUID, user_repo: UserRepo) -> UserResponse:
    user = await GetUserQuery(user_repo).execute(user_id)
    return _user_response(user)


@router.put(
    "/{user_id}",
    summary="Update user",
    responses={
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: NOT_FOUND_RESPONSE,
    },
)
async def update_user(
    user_id: UUID,
    request: UserUpdateRequest,
    user_repo: UserRepo,
    session: DBSession,
) -> UserResponse:
    try:
        user = await UpdateUserCommand(user_repo).execute(
            user_id=user_id,
            name=request.name,
            email=request.email,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _user_response(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    responses={422: NOT_FOUND_RESPONSE},
)
async def delete_user(
    user_id: UUID,
    user_repo: UserRepo,
    session: DBSession,
) -> None:
    try:
        await DeleteUserCommand(user_repo).execute(user_id)
        await session.commit()
    except Exception:
        await session.rollback()
        raise


@router.post(
    "/{user_id}/change-password",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Change password",
    responses={
        400: {"model": ErrorResponse, "description": "Passwords differ"},
        401: {"model": ErrorResponse, "description": "Wrong password"},
        422: NOT_FOUND_RESPONSE,
    },
)
async def change_password(
    user_id: UUID,
    request: ChangePasswordRequest,
    user_repo: UserRepo,
    password_service: PasswordService,
    session: DBSession,
) -> None:
    command = ChangePasswordCommand(user_repo, password_service)
    try:
        await command.execute(
            user_id=user_id,
            password_old=request.password_old,
            password_new=request.password_new,
            password_confirm=request.password_confirm,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise
