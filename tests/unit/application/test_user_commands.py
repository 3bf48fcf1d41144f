"""Unit tests for the user management commands and queries."""

from unittest.mock import AsyncMock, Mock
from uuid import uuid4

import pytest

from tabungan.application.commands.user import (
    ChangePasswordCommand,
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)
from tabungan.application.queries.user import GetUserQuery, ListUsersQuery
from tabungan.domain.user import (
    EmailAlreadyExistsError,
    IncorrectPasswordError,
    PasswordConfirmationMismatchError,
    User,
    UserNotFoundError,
    UserRepository,
)
from tabungan_auth import PasswordHashingService


def _user(name: str = "Anna", email: str = "anna@example.com") -> User:
    return User.create(name=name, email=email, password_hash="old-hash")


class TestCreateUserCommand:
    def setup_method(self):
        self.user_repo = AsyncMock(spec=UserRepository)
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "new-hash"
        self.command = CreateUserCommand(self.user_repo, self.password_service)

    async def test_creates_user(self):
        self.user_repo.exists_by_email.return_value = False

        user = await self.command.execute(
            name="Anna",
            email="anna@example.com",
            password="password123",
            password_confirm="password123",
        )

        assert user.password_hash == "new-hash"
        self.user_repo.save.assert_awaited_once_with(user)

    async def test_mismatched_confirmation_is_checked_first(self):
        with pytest.raises(PasswordConfirmationMismatchError):
            await self.command.execute(
                name="Anna",
                email="anna@example.com",
                password="password123",
                password_confirm="password124",
            )

        self.user_repo.exists_by_email.assert_not_awaited()

    async def test_taken_email_raises_conflict(self):
        self.user_repo.exists_by_email.return_value = True

        with pytest.raises(EmailAlreadyExistsError):
            await self.command.execute(
                name="Anna",
                email="anna@example.com",
                password="password123",
                password_confirm="password123",
            )

        self.user_repo.save.assert_not_awaited()


class TestUpdateUserCommand:
    def setup_method(self):
        self.user_repo = AsyncMock(spec=UserRepository)
        self.command = UpdateUserCommand(self.user_repo)

    async def test_updates_name_and_email(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user
        self.user_repo.find_by_email.return_value = None

        updated = await self.command.execute(
            user_id=user.id, name="Annie", email="annie@example.com"
        )

        assert updated.name == "Annie"
        assert updated.email == "annie@example.com"
        self.user_repo.save.assert_awaited_once_with(user)

    async def test_keeping_own_email_is_allowed(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user
        self.user_repo.find_by_email.return_value = user

        updated = await self.command.execute(
            user_id=user.id, name="Annie", email="anna@example.com"
        )

        assert updated.name == "Annie"

    async def test_email_of_other_user_is_rejected(self):
        user = _user()
        self.user_repo.find_by_id.return_value = user
        self.user_repo.find_by_email.return_value = _user("Bob", "bob@example.com")

        with pytest.raises(EmailAlreadyExistsError):
            await self.command.execute(
                user_id=user.id, name="Anna", email="bob@example.com"
            )

        self.user_repo.save.assert_not_awaited()

    async def test_unknown_user_raises(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.command.execute(
                user_id=uuid4(), name="Anna", email="anna@example.com"
            )


class TestDeleteUserCommand:
    async def test_deletes_user(self):
        user_repo = AsyncMock(spec=UserRepository)
        user_repo.delete.return_value = True
        user_id = uuid4()

        await DeleteUserCommand(user_repo).execute(user_id)

        user_repo.delete.assert_awaited_once_with(user_id)

    async def test_unknown_user_raises(self):
        user_repo = AsyncMock(spec=UserRepository)
        user_repo.delete.return_value = False

        with pytest.raises(UserNotFoundError) as exc_info:
            await DeleteUserCommand(user_repo).execute(uuid4())

        assert exc_info.value.message == "Unknown user"


class TestChangePasswordCommand:
    def setup_method(self):
        self.user = _user()
        self.user_repo = AsyncMock(spec=UserRepository)
        self.user_repo.find_by_id.return_value = self.user
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = "new-hash"
        self.command = ChangePasswordCommand(self.user_repo, self.password_service)

    async def test_changes_password(self):
        self.password_service.verify.return_value = True

        await self.command.execute(
            user_id=self.user.id,
            password_old="old-password",
            password_new="new-password",
            password_confirm="new-password",
        )

        assert self.user.password_hash == "new-hash"
        self.password_service.verify.assert_called_once_with(
            "old-password", "old-hash"
        )
        self.user_repo.save.assert_awaited_once_with(self.user)

    async def test_wrong_old_password_raises(self):
        self.password_service.verify.return_value = False

        with pytest.raises(IncorrectPasswordError):
            await self.command.execute(
                user_id=self.user.id,
                password_old="guess",
                password_new="new-password",
                password_confirm="new-password",
            )

        assert self.user.password_hash == "old-hash"
        self.user_repo.save.assert_not_awaited()

    async def test_mismatched_confirmation_raises(self):
        with pytest.raises(PasswordConfirmationMismatchError):
            await self.command.execute(
                user_id=self.user.id,
                password_old="old-password",
                password_new="new-password",
                password_confirm="other-password",
            )

        self.user_repo.find_by_id.assert_not_awaited()

    async def test_unknown_user_raises(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await self.command.execute(
                user_id=uuid4(),
                password_old="old-password",
                password_new="new-password",
                password_confirm="new-password",
            )


class TestUserQueries:
    async def test_get_user(self):
        user = _user()
        user_repo = AsyncMock(spec=UserRepository)
        user_repo.find_by_id.return_value = user

        assert await GetUserQuery(user_repo).execute(user.id) is user

    async def test_get_unknown_user_raises(self):
        user_repo = AsyncMock(spec=UserRepository)
        user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError):
            await GetUserQuery(user_repo).execute(uuid4())

    async def test_list_users_pages_repository_contents(self):
        user_repo = AsyncMock(spec=UserRepository)
        user_repo.list_all.return_value = [
            _user("Anna", "anna@example.com"),
            _user("Bob", "bob@example.com"),
            _user("Carl", "carl@example.com"),
        ]

        page = await ListUsersQuery(user_repo).execute(
            page_number=1, page_size=2, sort="name:desc"
        )

        assert [item.name for item in page.data] == ["Carl", "Bob"]
        assert page.total_pages == 2
