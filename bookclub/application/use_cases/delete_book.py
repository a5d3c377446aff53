from __future__ import annotations

from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.exceptions import BookNotFoundError


class DeleteBookUseCase:
    def __init__(self, *, books_port: BooksPort):
        self._books_port = books_port

    def execute(self, *, book_id: int) -> None:
        if self._books_port.delete_book(book_id=book_id) == 0:
            raise BookNotFoundError("Book not found.")
