"""Application commands - state-changing use cases."""

from tabungan.application.commands.user import (
    ChangePasswordCommand,
    CreateUserCommand,
    DeleteUserCommand,
    UpdateUserCommand,
)

__all__ = [
    "ChangePasswordCommand",
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
