from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping

from bookclub.domain.entities.auth import OAuthState, UserSession
from bookclub.domain.entities.book import Book
from bookclub.domain.entities.club import Club, Membership
from bookclub.domain.entities.user import User


def _as_datetime(value: Any) -> datetime:
    # SQLite hands timestamps back as text.
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def map_row_to_book(row: Mapping[str, Any]) -> Book:
    return Book(
        id=int(row["id"]),
        title=row["title"],
        author=row["author"],
    )


def map_row_to_user(row: Mapping[str, Any]) -> User:
    return User(
        id=int(row["id"]),
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        created_at=_as_datetime(row["created_at"]),
        updated_at=_as_datetime(row["updated_at"]),
    )


def map_row_to_club(row: Mapping[str, Any]) -> Club:
    return Club(
        id=int(row["id"]),
        name=row["name"],
        description=row["description"],
        created_at=_as_datetime(row["created_at"]),
        updated_at=_as_datetime(row["updated_at"]),
    )


def map_row_to_membership(row: Mapping[str, Any]) -> Membership:
    return Membership(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        club_id=int(row["club_id"]),
        permission_level=int(row["permission_level"]),
        created_at=_as_datetime(row["created_at"]),
    )


def map_row_to_oauth_state(row: Mapping[str, Any]) -> OAuthState:
    return OAuthState(
        csrf_state=row["csrf_state"],
        nonce=row["nonce"],
        return_url=row["return_url"],
    )


def map_row_to_user_session(row: Mapping[str, Any]) -> UserSession:
    return UserSession(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        token_p1=row["token_p1"],
        token_p2=row["token_p2"],
        created_at=_as_datetime(row["created_at"]),
        expires_at=_as_datetime(row["expires_at"]),
    )
