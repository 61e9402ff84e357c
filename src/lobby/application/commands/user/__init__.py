"""User commands."""

from lobby.application.commands.user.register_user_command import (
    RegisterUserCommand,
)

__all__ = ["RegisterUserCommand"]
