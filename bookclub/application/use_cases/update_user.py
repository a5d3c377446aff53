from __future__ import annotations

from bookclub.application.dto.users import UpdateUserInput
from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.user import User
from bookclub.domain.exceptions import EmailAlreadyExistsError, EmptyUpdateError, UserNotFoundError

from .auth_common import normalize_email, utcnow


class UpdateUserUseCase:
    def __init__(self, *, users_port: UsersPort):
        self._users_port = users_port

    def execute(self, command: UpdateUserInput) -> User:
        if command.email is None and command.first_name is None and command.last_name is None:
            raise EmptyUpdateError("No fields to update.")

        email = normalize_email(command.email) if command.email is not None else None
        if email is not None:
            owner = self._users_port.get_user_by_email(email=email)
            if owner is not None and owner.id != command.user_id:
                raise EmailAlreadyExistsError("Email already in use.")

        user = self._users_port.update_user(
            user_id=command.user_id,
            email=email,
            first_name=command.first_name,
            last_name=command.last_name,
            updated_at=utcnow(),
        )
        if user is None:
            raise UserNotFoundError("User not found.")
        return user
