"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tabungan.domain.shared.time import as_utc
from tabungan.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
    normalize_email,
)
from tabungan.infrastructure.persistence.sqlalchemy.models import UserModel
from tabungan.infrastructure.persistence.sqlalchemy.repositories.integrity import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """Users in the ``users`` table.

    Writes are flushed, never committed: the caller owns the transaction.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        model = await self._session.get(UserModel, user_id)
        return self._map_to_domain(model) if model else None

    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        # Normalised but not validated: a malformed address is simply absent
        stmt = select(UserModel).where(UserModel.email == normalize_email(str(email)))
        model = (await self._session.execute(stmt)).scalar_one_or_none()
        return self._map_to_domain(model) if model else None

    async def exists_by_email(self, email: Union[str, Email]) -> bool:
        stmt = select(UserModel.id).where(
            UserModel.email == normalize_email(str(email)),
        )
        return (await self._session.execute(stmt)).first() is not None

    async def save(self, user: User) -> None:
        model = await self._session.get(UserModel, user.id)
        if model is None:
            self._session.add(self._map_to_model(user))
        else:
            self._update_model(model, user)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.info("Saved user %s", user.id)

    async def delete(self, user_id: UUID) -> bool:
        model = await self._session.get(UserModel, user_id)
        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()
        logger.info("Deleted user %s", user_id)
        return True

    async def count(self) -> int:
        stmt = select(func.count(UserModel.id))
        return (await self._session.execute(stmt)).scalar_one()

    async def list_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        models = (await self._session.execute(stmt)).scalars().all()
        return [self._map_to_domain(model) for model in models]

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
