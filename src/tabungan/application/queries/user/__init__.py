"""User queries."""

from tabungan.application.queries.user.get_user_query import GetUserQuery
from tabungan.application.queries.user.list_users_query import ListUsersQuery

__all__ = ["GetUserQuery", "ListUsersQuery"]
