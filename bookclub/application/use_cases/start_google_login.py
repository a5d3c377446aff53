from __future__ import annotations

import logging

from bookclub.application.dto.auth import StartGoogleLoginInput, StartGoogleLoginOutput
from bookclub.application.ports.auth_port import AuthPort
from bookclub.application.ports.identity_provider_port import IdentityProviderPort
from bookclub.application.ports.secret_token_port import SecretTokenPort


logger = logging.getLogger(__name__)


class StartGoogleLoginUseCase:
    def __init__(
        self,
        *,
        auth_port: AuthPort,
        identity_provider_port: IdentityProviderPort,
        secret_token_port: SecretTokenPort,
    ):
        self._auth_port = auth_port
        self._identity_provider_port = identity_provider_port
        self._secret_token_port = secret_token_port

    def execute(self, command: StartGoogleLoginInput) -> StartGoogleLoginOutput:
        csrf_state = self._secret_token_port.generate_csrf_state()
        nonce = self._secret_token_port.generate_nonce()
        authorize_url = self._identity_provider_port.build_authorize_url(
            csrf_state=csrf_state,
            nonce=nonce,
        )

        # The state row must exist before the browser can reach the callback.
        self._auth_port.create_oauth_state(
            csrf_state=csrf_state,
            nonce=nonce,
            return_url=command.return_url,
        )
        logger.info("start_google_login: oauth_state_stored return_url=%s", command.return_url)
        return StartGoogleLoginOutput(authorize_url=authorize_url)
