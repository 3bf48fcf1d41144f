"""Repository interface for online-banking accounts."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from tabungan.domain.banking.aggregates import BankAccount
from tabungan.domain.user.value_objects.email import Email


class BankAccountRepository(ABC):
    """Repository for bank accounts.

    Lookups return ``None`` for a missing account; they never raise for
    the not-found case.
    """

    @abstractmethod
    async def find_by_id(self, account_id: UUID) -> Optional[BankAccount]:
        """Find an account by id."""

    @abstractmethod
    async def find_by_email(
        self,
        email: Union[str, Email],
    ) -> Optional[BankAccount]:
        """Find an account by email within the bank-account namespace."""

    @abstractmethod
    async def add(self, account: BankAccount) -> None:
        """
        Insert a new account.

        Raises
        ------
        BankEmailAlreadyExistsError
            If another bank account already uses the email
        """

    @abstractmethod
    async def adjust_balance(
        self,
        account_id: UUID,
        delta: Decimal,
    ) -> Optional[Decimal]:
        """
        Add ``delta`` to the stored balance as one atomic step.

        Parameters
        ----------
        account_id
            Account to adjust
        delta
            Signed amount; negative for a withdrawal

        Returns
        -------
        The new balance, or None if the account does not exist
        """

    @abstractmethod
    async def delete(self, account_id: UUID) -> bool:
        """Delete an account. Returns False if it did not exist."""
