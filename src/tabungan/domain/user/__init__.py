"""User domain manages account identity.

This domain handles:
- User aggregate (identity: id, name, email, password hash)
- Listing users with search, sort and pagination

Bank accounts live in tabungan.domain.banking and have their own email
namespace.
"""

from tabungan.domain.user.aggregates import User
from tabungan.domain.user.exceptions import (
    EmailAlreadyExistsError,
    IncorrectPasswordError,
    InvalidEmailError,
    InvalidQueryFieldError,
    InvalidSortError,
    PasswordConfirmationMismatchError,
    UserNotFoundError,
)
from tabungan.domain.user.repositories import UserRepository
from tabungan.domain.user.services import UserPage, UserQueryEngine, UserSummary
from tabungan.domain.user.value_objects import Email, normalize_email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "IncorrectPasswordError",
    "InvalidEmailError",
    "InvalidQueryFieldError",
    "InvalidSortError",
    "PasswordConfirmationMismatchError",
    "User",
    "UserNotFoundError",
    "UserPage",
    "UserQueryEngine",
    "UserRepository",
    "UserSummary",
    "normalize_email",
]
