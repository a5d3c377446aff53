from __future__ import annotations

from datetime import datetime, timedelta, timezone


SESSION_TTL = timedelta(hours=24)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    return email.strip().lower()
