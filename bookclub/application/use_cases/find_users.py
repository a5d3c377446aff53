from __future__ import annotations

from bookclub.application.dto.users import FindUsersInput
from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.user import User
from bookclub.domain.exceptions import UserNotFoundError, UserSearchInputError

from .auth_common import normalize_email


class FindUsersUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, command: FindUsersInput) -> list[User]:
        if command.email is None and command.first_name is None and command.last_name is None:
            raise UserSearchInputError("No search parameters provided.")

        users = self._users_port.find_users(
            email=normalize_email(command.email) if command.email is not None else None,
            first_name=command.first_name,
            last_name=command.last_name,
        )
        if not users:
            raise UserNotFoundError("No users found.")
        return users
