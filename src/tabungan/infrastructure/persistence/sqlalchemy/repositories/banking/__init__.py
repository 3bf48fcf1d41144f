from tabungan.infrastructure.persistence.sqlalchemy.repositories.banking.bank_account_repository import (  # NOQA: E501
    BankAccountRepositorySQLAlchemy,
)

__all__ = ["BankAccountRepositorySQLAlchemy"]
