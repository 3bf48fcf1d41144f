"""BankAccount aggregate."""

from datetime import datetime
from decimal import Decimal
from typing import Union
from uuid import UUID, uuid4

from tabungan.domain.shared.time import utc_now
from tabungan.domain.user.value_objects.email import Email, normalize_email

BALANCE_QUANTUM = Decimal("0.01")


def to_balance(value: Union[Decimal, int, str]) -> Decimal:
    """Coerce to a two-place Decimal without going through float."""
    return Decimal(value).quantize(BALANCE_QUANTUM)


class BankAccount:
    """
    Online-banking sub-account.

    Independent of ``User``: it has its own email namespace and its own
    password. The balance is signed and may go negative.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        balance: Union[Decimal, int, str] = Decimal("0"),
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._name = name
        self._email = Email.of(email)
        self._password_hash = password_hash
        self._balance = to_balance(balance)
        self._id = id or uuid4()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_email(self, email: Union[str, Email]) -> bool:
        """Exact match after normalisation."""
        return normalize_email(str(email)) == self._email.value

    @classmethod
    def open(
        cls,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        balance: Union[Decimal, int, str] = Decimal("0"),
    ) -> "BankAccount":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            balance=balance,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        balance: Decimal,
        created_at: datetime,
        updated_at: datetime,
    ) -> "BankAccount":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            balance=balance,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BankAccount):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"BankAccount(id={self._id}, email={self._email.value})"
