"""Banking domain exceptions.

This module defines exceptions for the online-banking sub-account. Every
ledger operation re-verifies the account's own email and password, so most
of these are credential outcomes rather than input errors.

Credential failures on ReadBalance use one uniform message whether the
email is unknown or the password is wrong.
"""

from uuid import UUID

from tabungan.domain.shared.exceptions import (
    AuthorizationFailed,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
)

# =============================================================================
# Base Banking Exception
# =============================================================================


class BankingDomainError(DomainException):
    """Base exception for banking domain errors."""


# =============================================================================
# Lookup / Uniqueness
# =============================================================================


class BankAccountNotFoundError(EntityNotFoundError, BankingDomainError):
    """No bank account with the given id."""

    def __init__(self, account_id: UUID) -> None:
        self.account_id = account_id
        super().__init__(
            "User not found",
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            details={"account_id": str(account_id)},
        )


class BankEmailAlreadyExistsError(ConflictError, BankingDomainError):
    """Another bank account already uses this email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email is already registered",
            code=ErrorCode.EMAIL_ALREADY_TAKEN,
        )


# =============================================================================
# Credential Re-verification
# =============================================================================


class BankCredentialsInvalidError(AuthorizationFailed, BankingDomainError):
    """Email unknown or password wrong when reading a balance."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid email or password",
            code=ErrorCode.INVALID_CREDENTIALS,
        )


class InvalidAccountPasswordError(AuthorizationFailed, BankingDomainError):
    """Password does not match the account looked up by id."""

    def __init__(self) -> None:
        super().__init__("Invalid password", code=ErrorCode.INVALID_PASSWORD)


class EmailMismatchError(AuthorizationFailed, BankingDomainError):
    """Email supplied to close an account is not the account's email."""

    def __init__(self) -> None:
        super().__init__(
            "Email does not match the user",
            code=ErrorCode.EMAIL_MISMATCH,
        )
