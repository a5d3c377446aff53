from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from bookclub.api.deps import (
    get_create_book_use_case,
    get_delete_book_use_case,
    get_find_books_use_case,
    get_get_book_use_case,
    get_import_book_use_case,
    get_list_books_use_case,
    get_search_open_library_use_case,
)
from bookclub.api.schemas.books import BookResponse, CreateBookRequest, OpenLibraryBookResponse
from bookclub.application.dto.books import CreateBookInput, FindBooksInput, ImportBookInput
from bookclub.application.use_cases.create_book import CreateBookUseCase
from bookclub.application.use_cases.delete_book import DeleteBookUseCase
from bookclub.application.use_cases.find_books import FindBooksUseCase
from bookclub.application.use_cases.get_book import GetBookUseCase
from bookclub.application.use_cases.import_book import ImportBookUseCase
from bookclub.application.use_cases.list_books import ListBooksUseCase
from bookclub.application.use_cases.search_open_library import SearchOpenLibraryUseCase
from bookclub.domain.entities.book import Book
from bookclub.domain.exceptions import BookLookupError, BookNotFoundError, BookSearchInputError


logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(book: Book) -> BookResponse:
    return BookResponse(id=book.id, title=book.title, author=book.author)


@router.post("/books/create", response_model=BookResponse)
def create_book(
    req: CreateBookRequest,
    use_case: CreateBookUseCase = Depends(get_create_book_use_case),
):
    book = use_case.execute(CreateBookInput(title=req.title, author=req.author))
    return _to_response(book)


@router.get("/books/list", response_model=list[BookResponse])
def list_books(
    use_case: ListBooksUseCase = Depends(get_list_books_use_case),
):
    return [_to_response(book) for book in use_case.execute()]


@router.get("/books/get/{book_id}", response_model=BookResponse)
def get_book(
    book_id: int,
    use_case: GetBookUseCase = Depends(get_get_book_use_case),
):
    try:
        book = use_case.execute(book_id=book_id)
    except BookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(book)


@router.get("/books/search", response_model=list[BookResponse])
def search_books(
    title: str | None = None,
    author: str | None = None,
    use_case: FindBooksUseCase = Depends(get_find_books_use_case),
):
    try:
        books = use_case.execute(FindBooksInput(title=title, author=author))
    except BookSearchInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except BookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return [_to_response(book) for book in books]


@router.post("/books/import", response_model=BookResponse)
def import_book(
    title: str,
    use_case: ImportBookUseCase = Depends(get_import_book_use_case),
):
    try:
        book = use_case.execute(ImportBookInput(title=title))
    except BookSearchInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except BookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except BookLookupError as exc:
        logger.warning("books: import_lookup_failed title=%s error=%s", title, exc)
        raise HTTPException(status_code=502, detail="Book lookup failed.") from exc
    return _to_response(book)


@router.delete("/books/{book_id}", status_code=204)
def delete_book(
    book_id: int,
    use_case: DeleteBookUseCase = Depends(get_delete_book_use_case),
):
    try:
        use_case.execute(book_id=book_id)
    except BookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)


@router.get("/open-library/search", response_model=OpenLibraryBookResponse)
def search_open_library(
    title: str,
    use_case: SearchOpenLibraryUseCase = Depends(get_search_open_library_use_case),
):
    try:
        book = use_case.execute(title=title)
    except BookSearchInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except BookNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except BookLookupError as exc:
        logger.warning("open_library: search_failed title=%s error=%s", title, exc)
        raise HTTPException(status_code=502, detail="Book lookup failed.") from exc
    return OpenLibraryBookResponse(title=book.title, authors=book.authors, key=book.key)
