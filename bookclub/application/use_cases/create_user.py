from __future__ import annotations

from bookclub.application.dto.users import CreateUserInput
from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.user import User
from bookclub.domain.exceptions import EmailAlreadyExistsError

from .auth_common import normalize_email, utcnow


class CreateUserUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, command: CreateUserInput) -> User:
        email = normalize_email(command.email)
        if not email:
            raise ValueError("email is required.")
        if self._users_port.get_user_by_email(email=email) is not None:
            raise EmailAlreadyExistsError("Email already in use.")

        now = utcnow()
        return self._users_port.create_user(
            email=email,
            first_name=command.first_name,
            last_name=command.last_name,
            created_at=now,
            updated_at=now,
        )
