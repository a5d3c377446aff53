from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.user import User
from bookclub.infrastructure.db.mappers.catalog_mapper import map_row_to_user


_USER_COLUMNS = "id, email, first_name, last_name, created_at, updated_at"


class SqlUsersRepository(UsersPort):
    def __init__(self, engine):
        self._engine = engine

    def create_user(
        self,
        *,
        email: str,
        first_name: str,
        last_name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> User:
        sql = f"""
            INSERT INTO users (email, first_name, last_name, created_at, updated_at)
            VALUES (:email, :first_name, :last_name, :created_at, :updated_at)
            RETURNING {_USER_COLUMNS}
        """
        params = {
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "created_at": created_at,
            "updated_at": updated_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_user(row)

    def list_users(self) -> list[User]:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM users
            ORDER BY id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql)).mappings().all()
        return [map_row_to_user(row) for row in rows]

    def get_user_by_id(self, *, user_id: int) -> User | None:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE id = :user_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def get_user_by_email(self, *, email: str) -> User | None:
        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE lower(email) = :email
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"email": email.lower()}).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def find_users(
        self,
        *,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
    ) -> list[User]:
        clauses: list[str] = []
        params: dict[str, str] = {}
        if email is not None:
            clauses.append("lower(email) = :email")
            params["email"] = email.lower()
        if first_name is not None:
            clauses.append("first_name = :first_name")
            params["first_name"] = first_name
        if last_name is not None:
            clauses.append("last_name = :last_name")
            params["last_name"] = last_name
        if not clauses:
            return []

        sql = f"""
            SELECT {_USER_COLUMNS}
            FROM users
            WHERE {" AND ".join(clauses)}
            ORDER BY id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [map_row_to_user(row) for row in rows]

    def update_user(
        self,
        *,
        user_id: int,
        email: str | None,
        first_name: str | None,
        last_name: str | None,
        updated_at: datetime,
    ) -> User | None:
        assignments = ["updated_at = :updated_at"]
        params: dict[str, object] = {"user_id": user_id, "updated_at": updated_at}
        if email is not None:
            assignments.append("email = :email")
            params["email"] = email
        if first_name is not None:
            assignments.append("first_name = :first_name")
            params["first_name"] = first_name
        if last_name is not None:
            assignments.append("last_name = :last_name")
            params["last_name"] = last_name

        sql = f"""
            UPDATE users
            SET {", ".join(assignments)}
            WHERE id = :user_id
            RETURNING {_USER_COLUMNS}
        """
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return map_row_to_user(row)

    def delete_user(self, *, user_id: int) -> int:
        sql = """
            DELETE FROM users
            WHERE id = :user_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), {"user_id": user_id})
        return result.rowcount
