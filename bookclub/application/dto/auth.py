from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StartGoogleLoginInput:
    return_url: str


@dataclass(frozen=True)
class StartGoogleLoginOutput:
    authorize_url: str


@dataclass(frozen=True)
class CompleteGoogleLoginInput:
    code: str
    state: str


@dataclass(frozen=True)
class CompleteGoogleLoginOutput:
    session_token: str
    return_url: str
    user_id: int
