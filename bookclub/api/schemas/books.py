from __future__ import annotations

from pydantic import BaseModel, Field


class CreateBookRequest(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    author: str = Field(..., min_length=1, max_length=500)


class BookResponse(BaseModel):
    id: int
    title: str
    author: str


class OpenLibraryBookResponse(BaseModel):
    title: str
    authors: list[str]
    key: str
