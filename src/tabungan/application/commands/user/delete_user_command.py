"""Delete a user."""

import logging
from uuid import UUID

from tabungan.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    def __init__(self, user_repo: UserRepository):
        self._user_repo = user_repo

    async def execute(self, user_id: UUID) -> None:
        deleted = await self._user_repo.delete(user_id)
        if not deleted:
            raise UserNotFoundError(str(user_id))
        logger.info("User deleted: %s", user_id)
