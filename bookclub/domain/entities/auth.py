from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


SESSION_TOKEN_SEPARATOR = "_"


@dataclass(frozen=True)
class OAuthState:
    csrf_state: str
    nonce: str
    return_url: str


@dataclass(frozen=True)
class UserSession:
    id: int
    user_id: int
    token_p1: str
    token_p2: str
    created_at: datetime
    expires_at: datetime

    @property
    def token(self) -> str:
        return f"{self.token_p1}{SESSION_TOKEN_SEPARATOR}{self.token_p2}"


@dataclass(frozen=True)
class ProviderMetadata:
    issuer: str
    authorization_endpoint: str
    token_endpoint: str
    userinfo_endpoint: str
    revocation_endpoint: str | None
    jwks_uri: str


@dataclass(frozen=True)
class ProviderTokens:
    access_token: str
    id_token: str


@dataclass(frozen=True)
class IdentityClaims:
    subject: str
    issuer: str
    audience: str
    email: str | None
    nonce: str


@dataclass(frozen=True)
class ProviderUserInfo:
    email: str
    email_verified: bool
    given_name: str
    family_name: str
