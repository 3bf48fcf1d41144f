"""Failures raised by user management and the user query engine."""

from tabungan.domain.shared.exceptions import (
    AuthorizationFailed,
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Address is empty or not shaped like local@domain.tld."""


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email is already registered",
            code=ErrorCode.EMAIL_ALREADY_TAKEN,
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            "Unknown user",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class IncorrectPasswordError(AuthorizationFailed):
    """The current password given for a password change is wrong."""

    def __init__(self) -> None:
        super().__init__("Wrong password", code=ErrorCode.INVALID_PASSWORD)


class InvalidSortError(ValidationError):
    """Sort expression is not ``field:asc`` or ``field:desc``."""

    def __init__(self, sort: str) -> None:
        self.sort = sort
        super().__init__(
            "Invalid sort order",
            code=ErrorCode.INVALID_SORT,
            details={"sort": sort},
        )


class InvalidQueryFieldError(ValidationError):
    """Search refers to a field that cannot be filtered on."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(
            f"Cannot search on field: {field}",
            code=ErrorCode.INVALID_QUERY_FIELD,
            details={"field": field},
        )


class PasswordConfirmationMismatchError(ValidationError):
    """New password and its confirmation differ."""

    def __init__(self) -> None:
        super().__init__(
            "Password and confirmation do not match",
            code=ErrorCode.PASSWORD_CONFIRMATION_MISMATCH,
        )
