from __future__ import annotations

from bookclub.application.dto.books import CreateBookInput
from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.entities.book import Book


class CreateBookUseCase:
    def __init__(self, *, books_port: BooksPort):
        self._books_port = books_port

    def execute(self, command: CreateBookInput) -> Book:
        return self._books_port.create_book(title=command.title, author=command.author)
