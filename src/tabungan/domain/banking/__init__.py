"""Banking domain package.

This package contains the online-banking sub-account: opening and closing
accounts, reading the balance and adjusting it. Every operation is
authorised by the account's own email and password.
"""

from tabungan.domain.banking.aggregates import BankAccount, to_balance
from tabungan.domain.banking.exceptions import (
    BankAccountNotFoundError,
    BankCredentialsInvalidError,
    BankEmailAlreadyExistsError,
    BankingDomainError,
    EmailMismatchError,
    InvalidAccountPasswordError,
)
from tabungan.domain.banking.repositories import BankAccountRepository

__all__ = [
    "BankAccount",
    "BankAccountNotFoundError",
    "BankAccountRepository",
    "BankCredentialsInvalidError",
    "BankEmailAlreadyExistsError",
    "BankingDomainError",
    "EmailMismatchError",
    "InvalidAccountPasswordError",
    "to_balance",
]
