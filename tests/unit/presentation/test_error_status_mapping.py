"""Unit tests for mapping domain and auth errors to HTTP status codes."""

from uuid import uuid4

import pytest

from tabungan.domain.banking import (
    BankAccountNotFoundError,
    BankCredentialsInvalidError,
    EmailMismatchError,
    InvalidAccountPasswordError,
)
from tabungan.domain.shared import ErrorCode
from tabungan.domain.user import (
    EmailAlreadyExistsError,
    IncorrectPasswordError,
    InvalidSortError,
    PasswordConfirmationMismatchError,
    UserNotFoundError,
)
from tabungan.presentation.api.exception_handlers import (
    _get_status_and_code_for_auth_error,
    _get_status_for_exception,
)
from tabungan_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    InvalidTokenError,
    WeakPasswordError,
)


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (InvalidSortError("name:sideways"), 400),
        (PasswordConfirmationMismatchError(), 400),
        (IncorrectPasswordError(), 401),
        (InvalidAccountPasswordError(), 401),
        (BankCredentialsInvalidError(), 401),
        (EmailMismatchError(), 403),
        (EmailAlreadyExistsError("anna@example.com"), 409),
        (UserNotFoundError("42"), 422),
        (BankAccountNotFoundError(uuid4()), 422),
    ],
)
def test_domain_error_status(exc, expected):
    assert _get_status_for_exception(exc) == expected


@pytest.mark.parametrize(
    ("exc", "expected_status", "expected_code"),
    [
        (AccountLockedError(failed_attempts=5), 403, ErrorCode.ACCOUNT_LOCKED),
        (InvalidCredentialsError(), 401, ErrorCode.INVALID_CREDENTIALS),
        (InvalidTokenError(), 401, ErrorCode.INVALID_TOKEN),
        (WeakPasswordError(), 400, ErrorCode.VALIDATION_ERROR),
    ],
)
def test_auth_error_status(exc, expected_status, expected_code):
    assert _get_status_and_code_for_auth_error(exc) == (expected_status, expected_code)
