"""Query to list users with search, sort and pagination."""

from typing import Optional

from tabungan.domain.user import UserPage, UserQueryEngine, UserRepository


class ListUsersQuery:
    """Load every user in store order and hand them to the query engine.

    The whole collection is read per call. Search and sort semantics
    live in ``UserQueryEngine``, not in SQL, so they behave the same for
    every backend.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        engine: Optional[UserQueryEngine] = None,
    ) -> None:
        self._user_repo = user_repo
        self._engine = engine or UserQueryEngine()

    async def execute(
        self,
        page_number: int = 1,
        page_size: int = 10,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> UserPage:
        users = await self._user_repo.list_all()
        return self._engine.list(
            users,
            page_number=page_number,
            page_size=page_size,
            search=search,
            sort=sort,
        )
