"""Create a user from the management API."""

import logging

from tabungan.domain.user import (
    EmailAlreadyExistsError,
    PasswordConfirmationMismatchError,
    User,
    UserRepository,
)
from tabungan_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Create a user after checking the password confirmation."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repo
        self._password_service = password_service

    async def execute(
        self,
        name: str,
        email: str,
        password: str,
        password_confirm: str,
    ) -> User:
        if password != password_confirm:
            raise PasswordConfirmationMismatchError
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        user = User.create(
            name=name,
            email=email,
            password_hash=self._password_service.hash(password),
        )
        await self._user_repo.save(user)

        logger.info("User created: %s", user.id)
        return user
