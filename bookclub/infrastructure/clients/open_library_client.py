from __future__ import annotations

import logging

import httpx

from bookclub.application.ports.book_lookup_port import BookLookupPort
from bookclub.domain.entities.open_library import OpenLibraryBook
from bookclub.domain.exceptions import BookLookupError


logger = logging.getLogger(__name__)

OPEN_LIBRARY_API_BASE = "https://openlibrary.org"
SEARCH_FIELDS = "title,author_name,key"


class OpenLibraryClient(BookLookupPort):
    def __init__(
        self,
        *,
        api_base: str = OPEN_LIBRARY_API_BASE,
        timeout_seconds: float = 10.0,
        http_client: httpx.Client | None = None,
    ):
        self._api_base = api_base.rstrip("/")
        self._timeout = timeout_seconds
        self._http_client = http_client

    def search(self, *, title: str) -> OpenLibraryBook | None:
        url = f"{self._api_base}/search.json"
        params = {"q": title, "fields": SEARCH_FIELDS}
        try:
            if self._http_client is not None:
                response = self._http_client.get(url, params=params)
            else:
                with httpx.Client(timeout=self._timeout) as client:
                    response = client.get(url, params=params)
        except httpx.HTTPError as exc:
            logger.warning("open_library: request_failed title=%s error=%s", title, exc)
            raise BookLookupError("Open Library request failed.") from exc

        if response.status_code != 200:
            logger.warning("open_library: unexpected_status title=%s status=%s", title, response.status_code)
            raise BookLookupError(f"Open Library returned HTTP {response.status_code}.")

        try:
            payload = response.json()
        except ValueError as exc:
            raise BookLookupError("Open Library returned invalid JSON.") from exc

        docs = payload.get("docs") if isinstance(payload, dict) else None
        if not docs:
            return None

        if not isinstance(docs, list) or not isinstance(docs[0], dict):
            logger.warning("open_library: malformed_docs title=%s", title)
            raise BookLookupError("Open Library returned malformed search results.")

        first = docs[0]
        return OpenLibraryBook(
            title=str(first.get("title") or title),
            authors=[str(name) for name in first.get("author_name") or []],
            key=str(first.get("key") or ""),
        )
