from __future__ import annotations

from typing import Protocol

from bookclub.domain.entities.open_library import OpenLibraryBook


class BookLookupPort(Protocol):
    def search(self, *, title: str) -> OpenLibraryBook | None:
        ...
