from __future__ import annotations

from datetime import datetime
from typing import Protocol

from bookclub.domain.entities.auth import OAuthState, UserSession


class AuthPort(Protocol):
    def create_oauth_state(self, *, csrf_state: str, nonce: str, return_url: str) -> None:
        ...

    def consume_oauth_state(self, *, csrf_state: str) -> OAuthState | None:
        """Delete the row for ``csrf_state`` and return it, in one atomic statement."""
        ...

    def create_session(
        self,
        *,
        user_id: int,
        token_p1: str,
        token_p2: str,
        created_at: datetime,
        expires_at: datetime,
    ) -> UserSession:
        ...
