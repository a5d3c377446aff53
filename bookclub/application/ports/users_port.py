from __future__ import annotations

from datetime import datetime
from typing import Protocol

from bookclub.domain.entities.user import User


class UsersPort(Protocol):
    def create_user(
        self,
        *,
        email: str,
        first_name: str,
        last_name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        ...

    def list_users(self) -> list[User]:
        ...

    def get_user_by_id(self, *, user_id: int) -> User | None:
        ...

    def get_user_by_email(self, *, email: str) -> User | None:
        ...

    def find_users(
        self,
        *,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
    ) -> list[User]:
        ...

    def update_user(
        self,
        *,
        user_id: int,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
        updated_at: datetime,
    ) -> User | None:
        ...

    def delete_user(self, *, user_id: int) -> int:
        ...
