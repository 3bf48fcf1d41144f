"""Ledger operations on online-banking accounts.

Every operation is authorised by the account's own email and password,
not by the caller's session. Balance adjustments for one account are
serialised in-process by a shared ``KeyedLock`` and written through the
repository's atomic ``adjust_balance``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Union
from uuid import UUID

from tabungan.application.services.keyed_lock import KeyedLock
from tabungan.domain.banking import (
    BankAccount,
    BankAccountNotFoundError,
    BankCredentialsInvalidError,
    BankEmailAlreadyExistsError,
    EmailMismatchError,
    InvalidAccountPasswordError,
    to_balance,
)
from tabungan.domain.user import normalize_email
from tabungan_auth import PasswordHashingService

if TYPE_CHECKING:
    from tabungan.domain.banking import BankAccountRepository

logger = logging.getLogger(__name__)


class LedgerService:
    """Open, read, adjust and close bank accounts."""

    def __init__(
        self,
        account_repository: BankAccountRepository,
        password_service: PasswordHashingService,
        account_locks: KeyedLock,
    ):
        self._account_repo = account_repository
        self._password_service = password_service
        self._account_locks = account_locks

    async def open_account(
        self,
        name: str,
        email: str,
        password: str,
        balance: Union[Decimal, int, str] = Decimal("0"),
    ) -> BankAccount:
        if await self._account_repo.find_by_email(email) is not None:
            raise BankEmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        account = BankAccount.open(
            name=name,
            email=email,
            password_hash=password_hash,
            balance=balance,
        )
        await self._account_repo.add(account)

        logger.info("Bank account opened: %s", account.id)
        return account

    async def read_balance(self, email: str, password: str) -> Decimal:
        """
        Return the balance of the account identified by email.

        Raises
        ------
        BankCredentialsInvalidError
            If the email is unknown or the password is wrong
        """
        account = await self._account_repo.find_by_email(normalize_email(email))
        password_hash = (
            account.password_hash
            if account is not None
            else self._password_service.placeholder_hash
        )
        password_matches = self._password_service.verify(password, password_hash)

        if account is None or not password_matches:
            raise BankCredentialsInvalidError
        return account.balance

    async def adjust_balance(
        self,
        account_id: UUID,
        email: str,  # noqa: ARG002
        password: str,
        amount: Union[Decimal, int, str],
    ) -> Decimal:
        """
        Add a signed amount to the balance and return the new balance.

        ``email`` is accepted for parity with the other operations; the
        account is located by id and authorised by password.

        Raises
        ------
        BankAccountNotFoundError
            If no account has this id
        InvalidAccountPasswordError
            If the password does not match
        """
        delta = to_balance(amount)

        async with self._account_locks.hold(account_id):
            account = await self._account_repo.find_by_id(account_id)
            if account is None:
                raise BankAccountNotFoundError(account_id)
            if not self._password_service.verify(password, account.password_hash):
                raise InvalidAccountPasswordError

            new_balance = await self._account_repo.adjust_balance(account_id, delta)
            if new_balance is None:
                raise BankAccountNotFoundError(account_id)

        logger.info("Balance of %s adjusted by %s", account_id, delta)
        return new_balance

    async def close_account(
        self,
        account_id: UUID,
        email: str,
        password: str,
    ) -> None:
        """
        Delete the account after checking email and password.

        Raises
        ------
        BankAccountNotFoundError
            If no account has this id
        EmailMismatchError
            If ``email`` is not the account's email
        InvalidAccountPasswordError
            If the password does not match
        """
        async with self._account_locks.hold(account_id):
            account = await self._account_repo.find_by_id(account_id)
            if account is None:
                raise BankAccountNotFoundError(account_id)
            if not account.has_email(email):
                raise EmailMismatchError
            if not self._password_service.verify(password, account.password_hash):
                raise InvalidAccountPasswordError

            await self._account_repo.delete(account_id)

        logger.info("Bank account closed: %s", account_id)
