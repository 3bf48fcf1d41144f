"""Application queries - read-only use cases."""

from tabungan.application.queries.user import GetUserQuery, ListUsersQuery

__all__ = ["GetUserQuery", "ListUsersQuery"]
