from __future__ import annotations

from typing import Protocol

from bookclub.domain.entities.auth import IdentityClaims, ProviderTokens, ProviderUserInfo


class IdentityProviderPort(Protocol):
    def build_authorize_url(self, *, csrf_state: str, nonce: str) -> str:
        ...

    def exchange_code(self, *, code: str) -> ProviderTokens:
        ...

    def verify_id_token(self, *, id_token: str, nonce: str) -> IdentityClaims:
        ...

    def fetch_user_info(self, *, access_token: str) -> ProviderUserInfo:
        ...
