from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OpenLibraryBook:
    title: str
    authors: list[str]
    key: str
