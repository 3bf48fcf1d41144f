from tabungan.domain.banking.aggregates.bank_account import (
    BankAccount,
    to_balance,
)

__all__ = ["BankAccount", "to_balance"]
