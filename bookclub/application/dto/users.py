from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserInput:
    email: str
    first_name: str
    last_name: str


@dataclass(frozen=True)
class UpdateUserInput:
    user_id: int
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


@dataclass(frozen=True)
class FindUsersInput:
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
