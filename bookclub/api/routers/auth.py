from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from bookclub.api.deps import get_complete_google_login_use_case, get_start_google_login_use_case
from bookclub.application.dto.auth import CompleteGoogleLoginInput, StartGoogleLoginInput
from bookclub.application.use_cases.login_google import CompleteGoogleLoginUseCase
from bookclub.application.use_cases.start_google_login import StartGoogleLoginUseCase
from bookclub.domain.exceptions import IdentityProviderError, LoginError


logger = logging.getLogger(__name__)

router = APIRouter()

SESSION_COOKIE_NAME = "session_token"


@router.get("/auth/google/login")
def google_login(
    return_path: str,
    use_case: StartGoogleLoginUseCase = Depends(get_start_google_login_use_case),
):
    try:
        output = use_case.execute(StartGoogleLoginInput(return_url=return_path))
    except IdentityProviderError as exc:
        logger.warning("auth: google_login_unavailable error=%s", exc)
        raise HTTPException(status_code=502, detail="Identity provider unavailable.") from exc
    return RedirectResponse(url=output.authorize_url, status_code=307)


@router.get("/auth/google/callback")
def google_callback(
    code: str | None = None,
    state: str | None = None,
    use_case: CompleteGoogleLoginUseCase = Depends(get_complete_google_login_use_case),
):
    if not code or not state:
        raise HTTPException(status_code=400, detail="code and state are required.")

    try:
        output = use_case.execute(CompleteGoogleLoginInput(code=code, state=state))
    except LoginError as exc:
        logger.info("auth: google_callback_rejected reason=%s", exc)
        raise HTTPException(status_code=401, detail="Authentication failed.") from exc
    except IdentityProviderError as exc:
        logger.warning("auth: google_callback_upstream_failed error=%s", exc)
        raise HTTPException(status_code=502, detail="Identity provider unavailable.") from exc

    response = RedirectResponse(url=output.return_url, status_code=303)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=output.session_token,
        path="/",
        httponly=True,
        secure=True,
        samesite="strict",
    )
    return response
