"""Update a user's name and email."""

import logging
from uuid import UUID

from tabungan.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Replace name and email; the email must not belong to another user."""

    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID, name: str, email: str) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        owner = await self._user_repo.find_by_email(email)
        if owner is not None and owner.id != user.id:
            raise EmailAlreadyExistsError(email)

        user.update_profile(name=name, email=email)
        await self._user_repo.save(user)

        logger.info("User updated: %s", user.id)
        return user
