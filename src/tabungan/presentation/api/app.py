"""Application factory.

Versioned endpoints live under ``/api/v1``; ``/health`` and ``/`` stay
unversioned.

Run with::

    uvicorn --factory tabungan.presentation.api.app:create_app
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import timedelta
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from tabungan.application.services import KeyedLock
from tabungan.infrastructure.persistence.sqlalchemy.models import Base
from tabungan.presentation.api.dependencies import get_current_user, get_engine
from tabungan.presentation.api.exception_handlers import setup_exception_handlers
from tabungan.presentation.api.routers import (
    auth_router,
    banking_router,
    users_router,
)
from tabungan.presentation.api.schemas.common import HealthResponse
from tabungan_auth import (
    LoginAttemptTracker,
    LoginThrottlePolicy,
    PasswordHashingService,
)
from tabungan_config.settings import Settings, get_settings

_OWN_LOGGERS = ("tabungan", "tabungan_auth", "tabungan_config")
_CHATTY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Log to stdout at ``log_level_str``; third-party loggers at WARNING."""
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _OWN_LOGGERS:
        logging.getLogger(name).setLevel(log_level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration, login and the current user.

Repeated failed logins for one email lock that email out for a while.
Every other endpoint needs the bearer token returned by login.
""",
    },
    {
        "name": "Users",
        "description": """User management.

`search=field:substring` filters, `sort=field:asc` or `field:desc` orders,
and `page_number` / `page_size` select a page. Fields: `id`, `name`,
`email`.
""",
    },
    {
        "name": "Online Banking",
        "description": """Sub-accounts with their own email and password.

Each call re-checks the account's password.
""",
    },
    {"name": "Health", "description": "Liveness probe."},
    {"name": "Info", "description": "Version and entry points."},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("Starting Tabungan API v%s", API_VERSION)
    engine = get_engine()
    await _create_schema(engine)

    # build the placeholder hash now rather than during the first login
    _ = app.state.password_service.placeholder_hash
    yield

    await engine.dispose()
    logger.info("Tabungan API stopped, database connections closed")


async def _create_schema(engine: AsyncEngine) -> None:
    """Create missing tables; exit if the database is unreachable."""
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database")
        raise SystemExit(1) from None
    logger.info("Database schema ready")


def _init_app_state(app: FastAPI, settings: Settings) -> None:
    """Build the components every request of this app shares.

    The failed-login counts, the placeholder hash and the per-email and
    per-account locks are read through the accessors in ``dependencies``.
    """
    app.state.password_service = PasswordHashingService(
        rounds=settings.password_hash_rounds,
    )
    app.state.attempt_tracker = LoginAttemptTracker(
        policy=LoginThrottlePolicy(
            max_failed_attempts=settings.login_max_failed_attempts,
            window=timedelta(minutes=settings.login_attempt_window_minutes),
        ),
    )
    app.state.account_locks = KeyedLock()
    app.state.login_locks = KeyedLock()


def create_v1_router() -> APIRouter:
    authenticated = [Depends(get_current_user)]

    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(
        users_router,
        prefix="/users",
        tags=["Users"],
        dependencies=authenticated,
    )
    v1_router.include_router(
        banking_router,
        prefix="/eonlinebankings",
        tags=["Online Banking"],
        dependencies=authenticated,
    )
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Used instead of ``get_settings()``, mainly by tests
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Account management with **throttled login** and "
            "**online-banking** sub-accounts."
        ),
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    _init_app_state(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy", version=API_VERSION, api_versions=["v1"]
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "users": f"{API_V1_PREFIX}/users",
                "eonlinebankings": f"{API_V1_PREFIX}/eonlinebankings",
            },
        }

    return app
