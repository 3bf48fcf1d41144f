"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from tabungan.domain.shared.time import utc_now
from tabungan.domain.user.value_objects.email import Email


class User:
    """
    A person who can log in and manage other users.

    Only the bcrypt hash of the login password is kept here; hashing and
    verification happen in the application layer.
    """

    def __init__(  # noqa: PLR0913
        self,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        now = utc_now()
        self._id = id or uuid4()
        self._name = name
        self._email = Email.of(email)
        self._password_hash = password_hash
        self._created_at = created_at or now
        self._updated_at = updated_at or now

    @classmethod
    def create(cls, name: str, email: Union[str, Email], password_hash: str) -> "User":
        return cls(name=name, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        name: str,
        email: Union[str, Email],
        password_hash: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Rebuild a stored user without touching its timestamps."""
        return cls(name, email, password_hash, id, created_at, updated_at)

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(self, name: str, email: Union[str, Email]) -> None:
        """Replace name and email; the caller checks email uniqueness."""
        self._name = name
        self._email = Email.of(email)
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self.email})"
