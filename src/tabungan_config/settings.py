"""Application settings.

Values come from, highest priority first:

1. OS environment variables
2. The env file named by ``TABUNGAN_ENV_FILE`` (absolute, or relative to
   the project root)
3. ``config/.env.dev`` for local development
4. ``config/.env`` for production / Docker
5. Field defaults

``jwt_secret_key`` and ``postgres_password`` have no default; the app
refuses to start without them.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "TABUNGAN_ENV_FILE"


def _project_root() -> Path:
    """Closest ancestor holding a ``config/`` dir or a ``pyproject.toml``."""
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        if (candidate / "config").is_dir() or (candidate / "pyproject.toml").is_file():
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    return _project_root() / "config"


def _env_file() -> Path | None:
    root = _project_root()
    candidates: list[Path] = []

    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else root / path)

    config_dir = get_config_dir()
    candidates += [config_dir / ".env.dev", config_dir / ".env"]

    return next((path for path in candidates if path.is_file()), None)


class Settings(BaseSettings):
    """Flat settings object shared by the API, auth and persistence layers."""

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Secrets (required)
    jwt_secret_key: SecretStr
    postgres_password: SecretStr

    app_name: str = "Tabungan"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "tabungan"
    database_url_override: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///./data/tabungan.db",
    )

    # HTTP API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""  # comma separated; empty allows none

    # Credentials and sessions
    jwt_access_token_expire_hours: int = Field(default=24, ge=1)
    password_hash_rounds: int = Field(default=12, ge=4, le=31)
    registration_mode: Literal["open", "admin_only"] = "admin_only"

    # Login throttling
    login_max_failed_attempts: int = Field(default=5, ge=1)
    login_attempt_window_minutes: int = Field(default=30, ge=1)

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [
            origin.strip()
            for origin in self.api_cors_origins.split(",")
            if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
