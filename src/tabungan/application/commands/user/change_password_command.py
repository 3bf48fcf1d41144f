"""Change a user's password."""

import logging
from uuid import UUID

from tabungan.domain.user import (
    IncorrectPasswordError,
    PasswordConfirmationMismatchError,
    UserNotFoundError,
    UserRepository,
)
from tabungan_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class ChangePasswordCommand:
    """Replace the password after checking the old one.

    Checks run in order: confirmation, existence, old password.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repo
        self._password_service = password_service

    async def execute(
        self,
        user_id: UUID,
        password_old: str,
        password_new: str,
        password_confirm: str,
    ) -> None:
        if password_new != password_confirm:
            raise PasswordConfirmationMismatchError

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))

        if not self._password_service.verify(password_old, user.password_hash):
            raise IncorrectPasswordError

        user.change_password_hash(self._password_service.hash(password_new))
        await self._user_repo.save(user)

        logger.info("Password changed for user: %s", user_id)
