from __future__ import annotations

from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.entities.book import Book


class ListBooksUseCase:
    def __init__(self, *, books_port: BooksPort):
        self._books_port = books_port

    def execute(self) -> list[Book]:
        return self._books_port.list_books()
