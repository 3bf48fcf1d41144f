"""SQLAlchemy implementation of BankAccountRepository."""

import logging
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tabungan.domain.banking import (
    BankAccount,
    BankAccountRepository,
    BankEmailAlreadyExistsError,
)
from tabungan.domain.shared.time import as_utc, utc_now
from tabungan.domain.user import Email, normalize_email
from tabungan.infrastructure.persistence.sqlalchemy.models import BankAccountModel
from tabungan.infrastructure.persistence.sqlalchemy.repositories.integrity import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class BankAccountRepositorySQLAlchemy(BankAccountRepository):
    """SQLAlchemy implementation of the BankAccountRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: UUID) -> Optional[BankAccount]:
        model = await self._find_model_by_id(account_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(
        self,
        email: Union[str, Email],
    ) -> Optional[BankAccount]:
        email_value = normalize_email(str(email))

        stmt = select(BankAccountModel).where(BankAccountModel.email == email_value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def add(self, account: BankAccount) -> None:
        try:
            self._session.add(self._map_to_model(account))
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise BankEmailAlreadyExistsError(account.email) from e
            raise

        logger.info("Created bank account: %s (email: %s)", account.id, account.email)

    async def adjust_balance(
        self,
        account_id: UUID,
        delta: Decimal,
    ) -> Optional[Decimal]:
        # Single UPDATE ... SET balance = balance + :delta; the database
        # serialises concurrent writers on the row.
        stmt = (
            update(BankAccountModel)
            .where(BankAccountModel.id == account_id)
            .values(
                balance=BankAccountModel.balance + delta,
                updated_at=utc_now(),
            )
            .returning(BankAccountModel.balance)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        new_balance = result.scalar_one_or_none()

        if new_balance is None:
            return None

        logger.debug("Adjusted balance of %s by %s", account_id, delta)
        return new_balance

    async def delete(self, account_id: UUID) -> bool:
        model = await self._find_model_by_id(account_id)

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted bank account: %s", account_id)
        return True

    async def _find_model_by_id(self, account_id: UUID) -> Optional[BankAccountModel]:
        return await self._session.get(BankAccountModel, account_id)

    def _map_to_domain(self, model: BankAccountModel) -> BankAccount:
        return BankAccount.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            balance=model.balance,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, account: BankAccount) -> BankAccountModel:
        return BankAccountModel(
            id=account.id,
            name=account.name,
            email=account.email,
            password_hash=account.password_hash,
            balance=account.balance,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )
