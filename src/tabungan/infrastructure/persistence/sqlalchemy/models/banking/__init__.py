from tabungan.infrastructure.persistence.sqlalchemy.models.banking.bank_account_model import (  # NOQA: E501
    BankAccountModel,
)

__all__ = ["BankAccountModel"]
