from __future__ import annotations

from fastapi.testclient import TestClient

from bookclub.api.deps import get_complete_google_login_use_case, get_start_google_login_use_case
from bookclub.application.dto.auth import (
    CompleteGoogleLoginInput,
    CompleteGoogleLoginOutput,
    StartGoogleLoginInput,
    StartGoogleLoginOutput,
)
from bookclub.domain.exceptions import EmailNotVerifiedError, IdentityProviderError, OAuthStateInvalidError
from bookclub.main import app


class FakeStartGoogleLoginUseCase:
    def __init__(self):
        self.commands: list[StartGoogleLoginInput] = []

    def execute(self, command: StartGoogleLoginInput) -> StartGoogleLoginOutput:
        self.commands.append(command)
        return StartGoogleLoginOutput(authorize_url="https://accounts.google.com/o/oauth2/v2/auth?state=s1")


class FakeCompleteGoogleLoginUseCase:
    def __init__(self, error: Exception | None = None):
        self.error = error

    def execute(self, command: CompleteGoogleLoginInput) -> CompleteGoogleLoginOutput:
        if self.error is not None:
            raise self.error
        return CompleteGoogleLoginOutput(session_token="p1_p2", return_url="/clubs", user_id=1)


def test_login_redirects_to_provider():
    start = FakeStartGoogleLoginUseCase()
    app.dependency_overrides[get_start_google_login_use_case] = lambda: start

    client = TestClient(app)
    response = client.get("/auth/google/login", params={"return_path": "/clubs"}, follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"].startswith("https://accounts.google.com/")
    assert start.commands == [StartGoogleLoginInput(return_url="/clubs")]

    app.dependency_overrides.clear()


def test_callback_sets_session_cookie_and_redirects():
    app.dependency_overrides[get_complete_google_login_use_case] = lambda: FakeCompleteGoogleLoginUseCase()

    client = TestClient(app)
    response = client.get(
        "/auth/google/callback",
        params={"code": "c1", "state": "s1"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/clubs"
    cookie = response.headers["set-cookie"]
    assert cookie.startswith("session_token=p1_p2;")
    assert "HttpOnly" in cookie
    assert "Path=/" in cookie
    assert "Secure" in cookie
    assert "SameSite=strict" in cookie

    app.dependency_overrides.clear()


def test_callback_requires_code_and_state():
    app.dependency_overrides[get_complete_google_login_use_case] = lambda: FakeCompleteGoogleLoginUseCase()

    client = TestClient(app)

    assert client.get("/auth/google/callback", params={"code": "c1"}).status_code == 400
    assert client.get("/auth/google/callback", params={"state": "s1"}).status_code == 400

    app.dependency_overrides.clear()


def test_callback_login_errors_share_generic_message():
    client = TestClient(app)
    for error in (OAuthStateInvalidError("invalid or expired state"), EmailNotVerifiedError("email not verified")):
        app.dependency_overrides[get_complete_google_login_use_case] = (
            lambda error=error: FakeCompleteGoogleLoginUseCase(error)
        )
        response = client.get(
            "/auth/google/callback",
            params={"code": "c1", "state": "s1"},
            follow_redirects=False,
        )
        assert response.status_code == 401
        assert response.json() == {"detail": "Authentication failed."}
        assert "set-cookie" not in response.headers

    app.dependency_overrides.clear()


def test_callback_upstream_failure_is_bad_gateway():
    app.dependency_overrides[get_complete_google_login_use_case] = lambda: FakeCompleteGoogleLoginUseCase(
        IdentityProviderError("Identity provider returned HTTP 500.")
    )

    client = TestClient(app)
    response = client.get("/auth/google/callback", params={"code": "c1", "state": "s1"})

    assert response.status_code == 502

    app.dependency_overrides.clear()
