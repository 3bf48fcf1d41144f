"""SQLAlchemy models for persistence layer."""

from tabungan.infrastructure.persistence.sqlalchemy.models.banking import (
    BankAccountModel,
)
from tabungan.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from tabungan.infrastructure.persistence.sqlalchemy.models.user import UserModel

__all__ = [
    "Base",
    "BankAccountModel",
    "TimestampMixin",
    "UserModel",
]
