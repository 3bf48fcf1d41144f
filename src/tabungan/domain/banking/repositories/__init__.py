from tabungan.domain.banking.repositories.bank_account_repository import (
    BankAccountRepository,
)

__all__ = ["BankAccountRepository"]
