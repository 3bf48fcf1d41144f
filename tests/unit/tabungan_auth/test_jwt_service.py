"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from tabungan_auth.exceptions import InvalidTokenError
from tabungan_auth.services import JWTService


class TestJWTServiceInit:
    """Tests for JWTService initialization."""

    def test_init_with_empty_secret_raises(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            JWTService(secret_key="")

    def test_custom_expiry(self):
        service = JWTService(secret_key="test-secret", access_token_expire_hours=1)

        assert service.access_token_lifetime == timedelta(hours=1)


class TestAccessTokens:
    """Tests for access token creation and verification."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = JWTService(secret_key="test-secret-key-12345")
        self.user_id = uuid4()
        self.email = "test@example.com"

    def test_verify_valid_access_token(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        payload = self.service.verify_token(token)

        assert payload.user_id == self.user_id
        assert payload.email == self.email
        assert not payload.is_expired()

    def test_verify_expired_token_raises(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
            expires_delta=timedelta(seconds=-1),  # Already expired
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            self.service.verify_token(token)

    def test_verify_invalid_token_raises(self):
        with pytest.raises(InvalidTokenError):
            self.service.verify_token("invalid.token.string")

    def test_verify_tampered_token_raises(self):
        token = self.service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token[:-5] + "xxxxx")

    def test_verify_wrong_secret_raises(self):
        other_service = JWTService(secret_key="different-secret")
        token = other_service.create_access_token(
            user_id=self.user_id,
            email=self.email,
        )

        with pytest.raises(InvalidTokenError):
            self.service.verify_token(token)
