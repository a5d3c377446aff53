from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


@router.get("/hi", response_class=PlainTextResponse)
def hello_world():
    return "Hello, World!"


@router.get("/health")
def health_check():
    return {"status": "ok"}
