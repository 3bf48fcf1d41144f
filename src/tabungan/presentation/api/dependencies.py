"""Dependencies shared by the routers.

Three lifetimes meet here:

- process-wide: settings, the database engine and its session maker
- application-wide: components created by ``create_app`` on ``app.state``
- per request: the database session and everything built on top of it
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tabungan.application.services import (
    AuthenticationService,
    KeyedLock,
    LedgerService,
)
from tabungan.domain.user import User
from tabungan.infrastructure.persistence.sqlalchemy.repositories import (
    BankAccountRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from tabungan.presentation.api.config import get_api_settings
from tabungan_auth import (
    InvalidTokenError,
    JWTService,
    LoginAttemptTracker,
    PasswordHashingService,
)
from tabungan_config.settings import Settings

logger = logging.getLogger(__name__)

# auto_error=False so a missing header reaches get_current_user as None
bearer_scheme = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


@lru_cache()
def get_database_url() -> str:
    """SQLAlchemy URL from settings; creates the parent dir of a SQLite file."""
    url = get_api_settings().database_url
    if url.startswith("sqlite") and ":memory:" not in url:
        Path(url.split("///")[-1]).parent.mkdir(parents=True, exist_ok=True)
    return url


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    return create_async_engine(get_database_url(), echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    # expire_on_commit=False: routers read attributes after committing
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, closed when the response is sent.

    Routers commit explicitly; anything left uncommitted is rolled back on
    close.
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


def get_attempt_tracker(request: Request) -> LoginAttemptTracker:
    return request.app.state.attempt_tracker


def get_account_locks(request: Request) -> KeyedLock:
    return request.app.state.account_locks


def get_login_locks(request: Request) -> KeyedLock:
    return request.app.state.login_locks


PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


def get_jwt_service(settings: SettingsDep) -> JWTService:
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
    )


def get_user_repository(session: DBSession) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(session)


UserRepo = Annotated[UserRepositorySQLAlchemy, Depends(get_user_repository)]


async def get_authentication_service(
    user_repo: UserRepo,
    password_service: PasswordService,
    jwt_service: JWTService = Depends(get_jwt_service),
    attempt_tracker: LoginAttemptTracker = Depends(get_attempt_tracker),
    login_locks: KeyedLock = Depends(get_login_locks),
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=user_repo,
        password_service=password_service,
        jwt_service=jwt_service,
        attempt_tracker=attempt_tracker,
        login_locks=login_locks,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


async def get_ledger_service(
    session: DBSession,
    password_service: PasswordService,
    account_locks: KeyedLock = Depends(get_account_locks),
) -> LedgerService:
    return LedgerService(
        account_repository=BankAccountRepositorySQLAlchemy(session),
        password_service=password_service,
        account_locks=account_locks,
    )


Ledger = Annotated[LedgerService, Depends(get_ledger_service)]


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    user_repo: UserRepo,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> User:
    """
    Resolve the bearer token to a stored user.

    Raises
    ------
    HTTPException
        401 when the header is missing, the token does not verify, or the
        user it names has since been deleted
    """
    if credentials is None:
        raise _unauthorized("Authentication required")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Rejected bearer token: %s", e)
        raise _unauthorized("Invalid or expired token") from e

    user = await user_repo.find_by_id(payload.user_id)
    if user is None:
        logger.warning("Token for unknown user %s", payload.user_id)
        raise _unauthorized("User not found")
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
