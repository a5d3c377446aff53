from __future__ import annotations

import logging

from bookclub.application.dto.auth import CompleteGoogleLoginInput, CompleteGoogleLoginOutput
from bookclub.application.ports.auth_port import AuthPort
from bookclub.application.ports.identity_provider_port import IdentityProviderPort
from bookclub.application.ports.secret_token_port import SecretTokenPort
from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.auth import ProviderUserInfo
from bookclub.domain.entities.user import User
from bookclub.domain.exceptions import EmailNotVerifiedError, OAuthStateInvalidError

from .auth_common import SESSION_TTL, normalize_email, utcnow


logger = logging.getLogger(__name__)


class CompleteGoogleLoginUseCase:
    """Finish the authorization-code flow started by ``StartGoogleLoginUseCase``.

    The stored state is consumed before anything else, so a replayed or
    forged callback never reaches the identity provider. No session is
    written unless every identity check has passed.
    """

    def __init__(
        self,
        *,
        auth_port: AuthPort,
        users_port: UsersPort,
        identity_provider_port: IdentityProviderPort,
        secret_token_port: SecretTokenPort,
    ):
        self._auth_port = auth_port
        self._users_port = users_port
        self._identity_provider_port = identity_provider_port
        self._secret_token_port = secret_token_port

    def execute(self, command: CompleteGoogleLoginInput) -> CompleteGoogleLoginOutput:
        oauth_state = self._auth_port.consume_oauth_state(csrf_state=command.state)
        if oauth_state is None:
            raise OAuthStateInvalidError("invalid or expired state")

        tokens = self._identity_provider_port.exchange_code(code=command.code)
        claims = self._identity_provider_port.verify_id_token(
            id_token=tokens.id_token,
            nonce=oauth_state.nonce,
        )
        user_info = self._identity_provider_port.fetch_user_info(access_token=tokens.access_token)
        if not user_info.email_verified:
            raise EmailNotVerifiedError("email not verified")

        user = self._upsert_user(user_info)
        logger.info(
            "login_google: identity_verified subject=%s user_id=%s",
            claims.subject,
            user.id,
        )

        token_p1, token_p2 = self._secret_token_port.generate_session_token_parts()
        created_at = utcnow()
        session = self._auth_port.create_session(
            user_id=user.id,
            token_p1=token_p1,
            token_p2=token_p2,
            created_at=created_at,
            expires_at=created_at + SESSION_TTL,
        )
        return CompleteGoogleLoginOutput(
            session_token=session.token,
            return_url=oauth_state.return_url,
            user_id=user.id,
        )

    def _upsert_user(self, user_info: ProviderUserInfo) -> User:
        email = normalize_email(user_info.email)
        user = self._users_port.get_user_by_email(email=email)
        if user is not None:
            return user

        now = utcnow()
        logger.info("login_google: creating_user email=%s", email)
        return self._users_port.create_user(
            email=email,
            first_name=user_info.given_name,
            last_name=user_info.family_name,
            created_at=now,
            updated_at=now,
        )
