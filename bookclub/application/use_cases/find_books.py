from __future__ import annotations

from bookclub.application.dto.books import FindBooksInput
from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.entities.book import Book
from bookclub.domain.exceptions import BookNotFoundError, BookSearchInputError


class FindBooksUseCase:
    def __init__(self, *, books_port: BooksPort):
        self._books_port = books_port

    def execute(self, command: FindBooksInput) -> list[Book]:
        if command.title is None and command.author is None:
            raise BookSearchInputError("No search parameters provided.")

        books = self._books_port.find_books(title=command.title, author=command.author)
        if not books:
            raise BookNotFoundError("No books found.")
        return books
