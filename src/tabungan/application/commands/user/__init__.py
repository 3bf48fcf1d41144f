"""User commands - account management."""

from tabungan.application.commands.user.change_password_command import (
    ChangePasswordCommand,
)
from tabungan.application.commands.user.create_user_command import (
    CreateUserCommand,
)
from tabungan.application.commands.user.delete_user_command import (
    DeleteUserCommand,
)
from tabungan.application.commands.user.update_user_command import (
    UpdateUserCommand,
)

__all__ = [
    "ChangePasswordCommand",
    "CreateUserCommand",
    "DeleteUserCommand",
    "UpdateUserCommand",
]
