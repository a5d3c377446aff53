from __future__ import annotations

from bookclub.application.ports.book_lookup_port import BookLookupPort
from bookclub.domain.entities.open_library import OpenLibraryBook
from bookclub.domain.exceptions import BookNotFoundError, BookSearchInputError


class SearchOpenLibraryUseCase:
    def __init__(self, *, book_lookup_port: BookLookupPort):
        self._book_lookup_port = book_lookup_port

    def execute(self, *, title: str) -> OpenLibraryBook:
        title = title.strip()
        if not title:
            raise BookSearchInputError("title must not be empty.")

        book = self._book_lookup_port.search(title=title)
        if book is None:
            raise BookNotFoundError("Book not found.")
        return book
