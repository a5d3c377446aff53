from __future__ import annotations

from datetime import datetime

from sqlalchemy import text

from bookclub.application.ports.auth_port import AuthPort
from bookclub.domain.entities.auth import OAuthState, UserSession
from bookclub.infrastructure.db.mappers.catalog_mapper import map_row_to_oauth_state, map_row_to_user_session


class SqlAuthRepository(AuthPort):
    def __init__(self, engine):
        self._engine = engine

    def create_oauth_state(self, *, csrf_state: str, nonce: str, return_url: str) -> None:
        sql = """
            INSERT INTO oauth_states (csrf_state, nonce, return_url)
            VALUES (:csrf_state, :nonce, :return_url)
        """
        with self._engine.begin() as conn:
            conn.execute(
                text(sql),
                {
                    "csrf_state": csrf_state,
                    "nonce": nonce,
                    "return_url": return_url,
                },
            )

    def consume_oauth_state(self, *, csrf_state: str) -> OAuthState | None:
        sql = """
            DELETE FROM oauth_states
            WHERE csrf_state = :csrf_state
            RETURNING csrf_state, nonce, return_url
        """
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), {"csrf_state": csrf_state}).mappings().first()
        if row is None:
            return None
        return map_row_to_oauth_state(row)

    def create_session(
        self,
        *,
        user_id: int,
        token_p1: str,
        token_p2: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> UserSession:
        sql = """
            INSERT INTO user_sessions (user_id, token_p1, token_p2, created_at, expires_at)
            VALUES (:user_id, :token_p1, :token_p2, :created_at, :expires_at)
            RETURNING id, user_id, token_p1, token_p2, created_at, expires_at
        """
        params = {
            "user_id": user_id,
            "token_p1": token_p1,
            "token_p2": token_p2,
            "created_at": created_at,
            "expires_at": expires_at,
        }
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), params).mappings().one()
        return map_row_to_user_session(row)
