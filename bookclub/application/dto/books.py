from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateBookInput:
    title: str
    author: str


@dataclass(frozen=True)
class FindBooksInput:
    title: str | None = None
    author: str | None = None


@dataclass(frozen=True)
class ImportBookInput:
    title: str
