from __future__ import annotations

import secrets
from uuid import uuid4

from bookclub.application.ports.secret_token_port import SecretTokenPort


class SecretTokenService(SecretTokenPort):
    def generate_csrf_state(self) -> str:
        return secrets.token_urlsafe(32)

    def generate_nonce(self) -> str:
        return secrets.token_urlsafe(32)

    def generate_session_token_parts(self) -> tuple[str, str]:
        return str(uuid4()), str(uuid4())
