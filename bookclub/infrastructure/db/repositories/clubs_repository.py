from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from bookclub.application.ports.clubs_port import ClubsPort, MembershipsPort
from bookclub.domain.entities.club import Club, Membership
from bookclub.infrastructure.db.mappers.catalog_mapper import map_row_to_club, map_row_to_membership


_CLUB_COLUMNS = "id, name, description, created_at, updated_at"
_MEMBERSHIP_COLUMNS = "id, user_id, club_id, permission_level, created_at"


class SqlClubsRepository(ClubsPort):
    def __init__(self, engine):
        self._engine = engine

    def create_club(
        self,
        *,
        name: str,
        description: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> Club:
        sql = f"""
            INSERT INTO clubs (name, description, created_at, updated_at)
            VALUES (:name, :description, :created_at, :updated_at)
            RETURNING {_CLUB_COLUMNS}
        """
        params = {
            "name": name,
            "description": description,
            "created_at": created_at,
            "updated_at": updated_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_club(row)

    def list_clubs(self) -> list[Club]:
        sql = f"""
            SELECT {_CLUB_COLUMNS}
            FROM clubs
            ORDER BY id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql)).mappings().all()
        return [map_row_to_club(row) for row in rows]

    def get_club_by_id(self, *, club_id: int) -> Club | None:
        sql = f"""
            SELECT {_CLUB_COLUMNS}
            FROM clubs
            WHERE id = :club_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"club_id": club_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_club(row)

    def update_club(
        self,
        *,
        club_id: int,
        name: str | None,
        description: str | None,
        updated_at: datetime,
    ) -> Club | None:
        assignments = ["updated_at = :updated_at"]
        params: dict[str, object] = {"club_id": club_id, "updated_at": updated_at}
        if name is not None:
            assignments.append("name = :name")
            params["name"] = name
        if description is not None:
            assignments.append("description = :description")
            params["description"] = description

        sql = f"""
            UPDATE clubs
            SET {", ".join(assignments)}
            WHERE id = :club_id
            RETURNING {_CLUB_COLUMNS}
        """
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().first()
        if row is None:
            return None
        return map_row_to_club(row)

    def delete_club(self, *, club_id: int) -> int:
        sql = """
            DELETE FROM clubs
            WHERE id = :club_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), {"club_id": club_id})
        return result.rowcount


class SqlMembershipsRepository(MembershipsPort):
    def __init__(self, engine):
        self._engine = engine

    def create_membership(
        self,
        *,
        user_id: int,
        club_id: int,
        permission_level: int,
        created_at: datetime,
    ) -> Membership:
        sql = f"""
            INSERT INTO memberships (user_id, club_id, permission_level, created_at)
            VALUES (:user_id, :club_id, :permission_level, :created_at)
            RETURNING {_MEMBERSHIP_COLUMNS}
        """
        params = {
            "user_id": user_id,
            "club_id": club_id,
            "permission_level": permission_level,
            "created_at": created_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_membership(row)

    def list_memberships(self, *, user_id: int | None, club_id: int | None) -> list[Membership]:
        clauses: list[str] = []
        params: dict[str, int] = {}
        if user_id is not None:
            clauses.append("user_id = :user_id")
            params["user_id"] = user_id
        if club_id is not None:
            clauses.append("club_id = :club_id")
            params["club_id"] = club_id
        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        sql = f"""
            SELECT {_MEMBERSHIP_COLUMNS}
            FROM memberships
            {where}
            ORDER BY id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), params).mappings().all()
        return [map_row_to_membership(row) for row in rows]

    def get_membership_by_id(self, *, membership_id: int) -> Membership | None:
        sql = f"""
            SELECT {_MEMBERSHIP_COLUMNS}
            FROM memberships
            WHERE id = :membership_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"membership_id": membership_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_membership(row)

    def get_membership_for_user_club(self, *, user_id: int, club_id: int) -> Membership | None:
        sql = f"""
            SELECT {_MEMBERSHIP_COLUMNS}
            FROM memberships
            WHERE user_id = :user_id
              AND club_id = :club_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"user_id": user_id, "club_id": club_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_membership(row)

    def delete_membership(self, *, membership_id: int) -> int:
        sql = """
            DELETE FROM memberships
            WHERE id = :membership_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), {"membership_id": membership_id})
        return result.rowcount
