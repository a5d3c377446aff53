from __future__ import annotations

import logging
from threading import Lock
from typing import Any
from urllib.parse import urlencode

import httpx
import jwt
from google.auth import exceptions as google_auth_exceptions
from google.auth.transport import requests
from google.oauth2 import id_token

from bookclub.application.ports.identity_provider_port import IdentityProviderPort
from bookclub.domain.entities.auth import IdentityClaims, ProviderMetadata, ProviderTokens, ProviderUserInfo
from bookclub.domain.exceptions import IdentityProviderError, IdentityTokenValidationError


logger = logging.getLogger(__name__)

GOOGLE_ISSUER_URL = "https://accounts.google.com"
DISCOVERY_PATH = "/.well-known/openid-configuration"
CALLBACK_PATH = "/auth/google/callback"
SCOPES = ("openid", "email", "profile")


class GoogleOidcClient(IdentityProviderPort):
    """Authorization-code client for Google's OpenID Connect endpoints.

    Provider metadata is discovered on first use and then kept for the
    lifetime of the client. ID-token signature and audience are checked by
    ``google-auth`` against the discovered ``jwks_uri``; issuer and nonce are
    checked here against the discovered issuer and the stored nonce.
    """

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        host_url: str,
        issuer_url: str = GOOGLE_ISSUER_URL,
        timeout_seconds: float = 10.0,
        http_client: httpx.Client | None = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_uri = f"{host_url.rstrip('/')}{CALLBACK_PATH}"
        self._issuer_url = issuer_url.rstrip("/")
        self._timeout = timeout_seconds
        self._http_client = http_client
        self._metadata: ProviderMetadata | None = None
        self._lock = Lock()

    @property
    def redirect_uri(self) -> str:
        return self._redirect_uri

    def metadata(self) -> ProviderMetadata:
        with self._lock:
            if self._metadata is None:
                self._metadata = self._discover()
            return self._metadata

    def build_authorize_url(self, *, csrf_state: str, nonce: str) -> str:
        params = {
            "response_type": "code",
            "client_id": self._client_id,
            "redirect_uri": self._redirect_uri,
            "scope": " ".join(SCOPES),
            "state": csrf_state,
            "nonce": nonce,
        }
        return f"{self.metadata().authorization_endpoint}?{urlencode(params)}"

    def exchange_code(self, *, code: str) -> ProviderTokens:
        payload = self._request_json(
            "POST",
            self.metadata().token_endpoint,
            data={
                "grant_type": "authorization_code",
                "code": code,
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "redirect_uri": self._redirect_uri,
            },
        )
        access_token = payload.get("access_token")
        raw_id_token = payload.get("id_token")
        if not access_token or not raw_id_token:
            raise IdentityProviderError("Token response missing access_token or id_token.")
        return ProviderTokens(access_token=str(access_token), id_token=str(raw_id_token))

    def verify_id_token(self, *, id_token: str, nonce: str) -> IdentityClaims:
        try:
            payload = id_token_verify(
                token=id_token,
                audience=self._client_id,
                certs_url=self.metadata().jwks_uri,
            )
        except (google_auth_exceptions.TransportError, jwt.PyJWKClientConnectionError) as exc:
            raise IdentityProviderError("Unable to fetch provider signing keys.") from exc
        except (ValueError, google_auth_exceptions.GoogleAuthError, jwt.PyJWTError) as exc:
            raise IdentityTokenValidationError("Invalid id_token.") from exc

        issuer = str(payload.get("iss", ""))
        if _strip_scheme(issuer) != _strip_scheme(self.metadata().issuer):
            raise IdentityTokenValidationError("Unexpected id_token issuer.")

        subject = payload.get("sub")
        if not subject:
            raise IdentityTokenValidationError("id_token missing subject.")

        token_nonce = payload.get("nonce")
        if token_nonce != nonce:
            raise IdentityTokenValidationError("id_token nonce mismatch.")

        email = payload.get("email") if isinstance(payload.get("email"), str) else None
        return IdentityClaims(
            subject=str(subject),
            issuer=issuer,
            audience=self._client_id,
            email=email,
            nonce=str(token_nonce),
        )

    def fetch_user_info(self, *, access_token: str) -> ProviderUserInfo:
        payload = self._request_json(
            "GET",
            self.metadata().userinfo_endpoint,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        email = payload.get("email")
        if not email:
            raise IdentityProviderError("User info missing email.")

        email_verified_raw = payload.get("email_verified", payload.get("verified_email", False))
        email_verified = bool(email_verified_raw)
        if isinstance(email_verified_raw, str):
            email_verified = email_verified_raw.lower() == "true"

        return ProviderUserInfo(
            email=str(email),
            email_verified=email_verified,
            given_name=str(payload.get("given_name") or ""),
            family_name=str(payload.get("family_name") or ""),
        )

    def _discover(self) -> ProviderMetadata:
        url = f"{self._issuer_url}{DISCOVERY_PATH}"
        payload = self._request_json("GET", url)
        try:
            metadata = ProviderMetadata(
                issuer=payload["issuer"],
                authorization_endpoint=payload["authorization_endpoint"],
                token_endpoint=payload["token_endpoint"],
                userinfo_endpoint=payload["userinfo_endpoint"],
                revocation_endpoint=payload.get("revocation_endpoint"),
                jwks_uri=payload["jwks_uri"],
            )
        except KeyError as exc:
            raise IdentityProviderError(f"Discovery document missing {exc.args[0]}.") from exc
        logger.info("google_oidc: discovered issuer=%s", metadata.issuer)
        return metadata

    def _request_json(self, method: str, url: str, **kwargs: Any) -> dict:
        try:
            if self._http_client is not None:
                response = self._http_client.request(method, url, **kwargs)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.request(method, url, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("google_oidc: request_failed method=%s url=%s error=%s", method, url, exc)
            raise IdentityProviderError("Identity provider request failed.") from exc

        if response.status_code != 200:
            logger.warning(
                "google_oidc: unexpected_status method=%s url=%s status=%s",
                method,
                url,
                response.status_code,
            )
            raise IdentityProviderError(f"Identity provider returned HTTP {response.status_code}.")
        try:
            payload = response.json()
        except ValueError as exc:
            raise IdentityProviderError("Identity provider returned invalid JSON.") from exc
        if not isinstance(payload, dict):
            raise IdentityProviderError("Identity provider returned an unexpected payload.")
        return payload


def _strip_scheme(issuer: str) -> str:
    return issuer.removeprefix("https://").rstrip("/")


def id_token_verify(*, token: str, audience: str, certs_url: str) -> dict:
    request = requests.Request()
    return id_token.verify_token(token, request, audience=audience, certs_url=certs_url)
