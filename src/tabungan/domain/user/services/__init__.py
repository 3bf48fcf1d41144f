"""User domain services."""

from tabungan.domain.user.services.user_query_engine import (
    SearchFilter,
    SortOrder,
    SortSpec,
    UserField,
    UserPage,
    UserQueryEngine,
    UserSummary,
    collation_key,
)

__all__ = [
    "SearchFilter",
    "SortOrder",
    "SortSpec",
    "UserField",
    "UserPage",
    "UserQueryEngine",
    "UserSummary",
    "collation_key",
]
