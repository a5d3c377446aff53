from __future__ import annotations

from sqlalchemy import text

from bookclub.application.ports.books_port import BooksPort
from bookclub.domain.entities.book import Book
from bookclub.infrastructure.db.mappers.catalog_mapper import map_row_to_book


class SqlBooksRepository(BooksPort):
    def __init__(self, engine):
        self._engine = engine

    def create_book(self, *, title: str, author: str) -> Book:
        sql = """
            INSERT INTO books (title, author)
            VALUES (:title, :author)
            RETURNING id, title, author
        """
        with self._engine.begin() as conn:
            row = conn.execute(text(sql), {"title": title, "author": author}).mappings().one()
        return map_row_to_book(row)

    def list_books(self) -> list[Book]:
        sql = """
            SELECT id, title, author
            FROM books
            ORDER BY id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql)).mappings().all()
        return [map_row_to_book(row) for row in rows]

    def get_book_by_id(self, *, book_id: int) -> Book | None:
        sql = """
            SELECT id, title, author
            FROM books
            WHERE id = :book_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"book_id": book_id}).mappings().first()
        if row is None:
            return None
        return map_row_to_book(row)

    def find_books(self, *, title: str | None, author: str | None) -> list[Book]:
        sql = """
            SELECT id, title, author
            FROM books
            WHERE title = :title
               OR author = :author
            ORDER BY id
        """
        with self._engine.connect() as conn:
            rows = conn.execute(text(sql), {"title": title, "author": author}).mappings().all()
        return [map_row_to_book(row) for row in rows]

    def delete_book(self, *, book_id: int) -> int:
        sql = """
            DELETE FROM books
            WHERE id = :book_id
        """
        with self._engine.begin() as conn:
            result = conn.execute(text(sql), {"book_id": book_id})
        return result.rowcount
