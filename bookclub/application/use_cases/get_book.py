from __future__ import annotations

from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.entities.book import Book
from bookclub.domain.exceptions import BookNotFoundError


class GetBookUseCase:
    def __init__(self, *, books_port: BooksPort):
        self._books_port = books_port

    def execute(self, *, book_id: int) -> Book:
        book = self._books_port.get_book_by_id(book_id=book_id)
        if book is None:
            raise BookNotFoundError("Book not found.")
        return book
