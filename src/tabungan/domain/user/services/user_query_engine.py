"""Search, sort and paginate a collection of users.

Expressions come straight from the query string:

- search ``"field:substring"`` keeps users whose field contains the
  substring, ignoring case. A malformed search (no colon, or an empty
  side) filters nothing. The search is not a regular expression: the
  substring is matched literally, so ``.`` or ``*`` only match
  themselves, and it runs to the end of the expression, so
  ``name:a:b`` looks for ``a:b`` rather than ``a``.
- sort ``"field:asc"`` / ``"field:desc"`` orders by the field with a
  locale-independent collation. Any other order is rejected.

Steps always run filter, then sort, then paginate, so page counts describe
the filtered set. Only ``id``, ``name`` and ``email`` can be searched or
sorted, and only those fields appear in the output.
"""

from __future__ import annotations

import math
import unicodedata
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional
from uuid import UUID

from tabungan.domain.user.aggregates.user import User
from tabungan.domain.user.exceptions import InvalidQueryFieldError, InvalidSortError


class UserField(str, Enum):
    """Fields that may be searched and sorted on."""

    ID = "id"
    NAME = "name"
    EMAIL = "email"

    def value_of(self, user: User) -> str:
        if self is UserField.ID:
            return str(user.id)
        if self is UserField.NAME:
            return user.name
        return user.email

    @classmethod
    def lookup(cls, name: str) -> Optional[UserField]:
        try:
            return cls(name)
        except ValueError:
            return None


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def collation_key(value: str) -> tuple[str, str]:
    """Sort key approximating a locale-aware comparison.

    Accents and case only break ties, so "émile" sorts with "emile" and
    "Bob" sorts between "anna" and "carl".
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value


@dataclass(frozen=True)
class SearchFilter:
    field: UserField
    substring: str

    @classmethod
    def parse(cls, expression: Optional[str]) -> Optional[SearchFilter]:
        """Parse ``field:substring``; None means "match everything"."""
        if not expression:
            return None
        field_name, sep, substring = expression.partition(":")
        if not sep or not field_name or not substring:
            return None

        field = UserField.lookup(field_name)
        if field is None:
            raise InvalidQueryFieldError(field_name)
        return cls(field=field, substring=substring)

    def matches(self, user: User) -> bool:
        return self.substring.casefold() in self.field.value_of(user).casefold()


@dataclass(frozen=True)
class SortSpec:
    field: UserField
    order: SortOrder

    @classmethod
    def parse(cls, expression: Optional[str]) -> Optional[SortSpec]:
        """Parse ``field:asc|desc``; None keeps store order."""
        if not expression:
            return None
        field_name, _, order_name = expression.partition(":")

        field = UserField.lookup(field_name)
        if field is None:
            raise InvalidSortError(expression)
        try:
            order = SortOrder(order_name)
        except ValueError as e:
            raise InvalidSortError(expression) from e
        return cls(field=field, order=order)

    def apply(self, users: list[User]) -> list[User]:
        return sorted(
            users,
            key=lambda user: collation_key(self.field.value_of(user)),
            reverse=self.order is SortOrder.DESC,
        )


@dataclass(frozen=True)
class UserSummary:
    """Public projection of a user. Never carries the password hash."""

    id: UUID
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> UserSummary:
        return cls(id=user.id, name=user.name, email=user.email)


@dataclass(frozen=True)
class UserPage:
    page_number: int
    page_size: int
    count: int
    total_pages: int
    has_previous_page: bool
    has_next_page: bool
    data: tuple[UserSummary, ...]


class UserQueryEngine:
    """Filter, sort and paginate users held in memory.

    ``page_number`` and ``page_size`` must be positive; validating them is
    the caller's job.
    """

    def list(
        self,
        users: Iterable[User],
        page_number: int,
        page_size: int,
        search: Optional[str] = None,
        sort: Optional[str] = None,
    ) -> UserPage:
        # Parse both expressions before touching the data so an invalid
        # sort aborts without partial work.
        search_filter = SearchFilter.parse(search)
        sort_spec = SortSpec.parse(sort)

        selected = [
            user
            for user in users
            if search_filter is None or search_filter.matches(user)
        ]
        if sort_spec is not None:
            selected = sort_spec.apply(selected)

        total = len(selected)
        start = (page_number - 1) * page_size
        end = min(start + page_size, total)
        window = selected[start:end]

        return UserPage(
            page_number=page_number,
            page_size=page_size,
            count=len(window),
            total_pages=math.ceil(total / page_size),
            has_previous_page=page_number > 1,
            has_next_page=end < total,
            data=tuple(UserSummary.from_entity(user) for user in window),
        )
