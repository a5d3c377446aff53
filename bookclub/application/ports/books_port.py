from __future__ import annotations

from typing import Protocol

from bookclub.domain.entities.book import Book


class BooksPort(Protocol):
    def create_book(self, *, title: str, author: str) -> Book:
        ...

    def list_books(self) -> list[Book]:
        ...

    def get_book_by_id(self, *, book_id: int) -> Book | None:
        ...

    def find_books(self, *, title: str | None, author: str | None) -> list[Book]:
        ...

    def delete_book(self, *, book_id: int) -> int:
        ...
