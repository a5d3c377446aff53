from __future__ import annotations

from bookclub.application.dto.books import ImportBookInput
from bookclub.application.ports.book_lookup_port import BookLookupPort
from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.entities.book import Book
from bookclub.domain.exceptions import BookNotFoundError, BookSearchInputError


UNKNOWN_AUTHOR = "Unknown"


class ImportBookUseCase:
    """Copy the best Open Library match for a title into the local catalog."""

    def __init__(self, *, books_port: BooksPort, book_lookup_port: BookLookupPort):
        self._books_port = books_port
        self._book_lookup_port = book_lookup_port

    def execute(self, command: ImportBookInput) -> Book:
        title = command.title.strip()
        if not title:
            raise BookSearchInputError("title must not be empty.")

        found = self._book_lookup_port.search(title=title)
        if found is None:
            raise BookNotFoundError("Book not found.")

        author = ", ".join(found.authors) if found.authors else UNKNOWN_AUTHOR
        return self._books_port.create_book(title=found.title, author=author)
