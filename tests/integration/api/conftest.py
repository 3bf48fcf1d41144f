"""Pytest fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from tabungan.infrastructure.persistence.sqlalchemy.models import Base
from tabungan.presentation.api.app import API_V1_PREFIX, create_app
from tabungan.presentation.api.config import get_api_settings
from tabungan.presentation.api.dependencies import get_db_session
from tabungan_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and a cheap bcrypt cost."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
        registration_mode="open",
    )


@pytest.fixture
async def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def test_client(api_settings, test_db_engine) -> TestClient:
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings)

    test_session_maker = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    return TestClient(app)


@pytest.fixture
def registered_user_data() -> dict:
    """Test user registration data."""
    return {
        "name": "Anna",
        "email": "anna@example.com",
        "password": "SecurePassword123!",
        "password_confirm": "SecurePassword123!",
    }


@pytest.fixture
def registered_user(test_client, registered_user_data, api_v1_prefix) -> dict:
    """Register the test user and return the response body."""
    response = test_client.post(
        f"{api_v1_prefix}/auth/register", json=registered_user_data
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_headers(registered_user) -> dict:
    """Get auth headers for a registered user."""
    token = registered_user["access_token"]
    return {"Authorization": f"Bearer {token}"}
