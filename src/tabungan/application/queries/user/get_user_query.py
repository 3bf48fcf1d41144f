"""Query to get one user by id."""

from uuid import UUID

from tabungan.domain.user import User, UserNotFoundError, UserRepository


class GetUserQuery:
    """Query to retrieve a user, failing for an unknown id."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user
