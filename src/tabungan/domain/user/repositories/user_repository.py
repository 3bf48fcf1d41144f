"""Persistence port for users."""

from abc import ABC, abstractmethod
from typing import Optional, Union
from uuid import UUID

from tabungan.domain.user.aggregates.user import User
from tabungan.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Store of ``User`` aggregates keyed by id and normalised email.

    A missing user is ``None`` (or ``False``), never an exception.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]: ...

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Case-insensitive; a malformed address simply finds nothing."""

    @abstractmethod
    async def exists_by_email(self, email: Union[str, Email]) -> bool: ...

    @abstractmethod
    async def save(self, user: User) -> None:
        """Insert or update.

        Raises
        ------
        EmailAlreadyExistsError
            If a different user already holds the email
        """

    @abstractmethod
    async def delete(self, user_id: UUID) -> bool:
        """Remove the user; ``False`` if there was none."""

    @abstractmethod
    async def count(self) -> int: ...

    @abstractmethod
    async def list_all(self) -> list[User]:
        """Every user, oldest first."""
