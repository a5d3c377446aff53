from __future__ import annotations

from typing import Protocol


class SecretTokenPort(Protocol):
    def generate_csrf_state(self) -> str:
        ...

    def generate_nonce(self) -> str:
        ...

    def generate_session_token_parts(self) -> tuple[str, str]:
        ...
