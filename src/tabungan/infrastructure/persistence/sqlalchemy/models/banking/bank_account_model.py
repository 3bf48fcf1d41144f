"""SQLAlchemy model for online-banking accounts."""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from tabungan.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class BankAccountModel(Base, TimestampMixin):
    """Database model for bank accounts.

    Separate from ``users``: the email index here is unique within bank
    accounts only.
    """

    __tablename__ = "bank_accounts"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(18, 2),
        nullable=False,
        default=Decimal("0"),
    )

    def __repr__(self) -> str:
        return f"<BankAccountModel(id={self.id}, email={self.email})>"
