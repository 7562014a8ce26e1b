"""Book form normalization and library list helpers.

Pure functions over the store's records: what gets inserted when a reader adds
a book, and how the library view filters and counts it.
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable, List, Optional

from .types import Book, ReadingProgress, ReadingStatus

DEFAULT_COVER_URL = "assets/book-cover-2.jpg"

STATUS_ALL = "all"

_LEADING_INT = re.compile(r"[+-]?\d+")


class BookFormError(ValueError):
    pass


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _to_int(value: Any) -> Optional[int]:
    """Leading whole number of a form value: "300 pages" -> 300, "12.0" -> 12."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return None
    match = _LEADING_INT.match(text)
    if not match:
        raise BookFormError(f"Not a whole number: {value!r}")
    return int(match.group(0))


def book_from_form(form: Dict[str, Any], user_id: str) -> Dict[str, Any]:
    """Turn raw add-book form fields into the row inserted into ``books``.

    Title and author are required. Empty optional text becomes None, a blank
    page count becomes 0 and a blank cover falls back to the placeholder.
    """
    title = _clean(form.get("title"))
    author = _clean(form.get("author"))
    if not title or not author:
        raise BookFormError("Please fill in at least the title and author")
    if not user_id:
        raise BookFormError("No authenticated user")

    return {
        "user_id": user_id,
        "title": title,
        "author": author,
        "total_pages": _to_int(form.get("total_pages")) or 0,
        "isbn": _clean(form.get("isbn")),
        "description": _clean(form.get("description")),
        "genre": _clean(form.get("genre")),
        "published_year": _to_int(form.get("published_year")),
        "cover_url": _clean(form.get("cover_url")) or DEFAULT_COVER_URL,
    }


def progress_for(book_id: str, progress: Iterable[ReadingProgress]) -> Optional[ReadingProgress]:
    return next((p for p in progress if p.book_id == book_id), None)


def progress_percentage(book: Book, progress: Optional[ReadingProgress]) -> int:
    if not book.total_pages or progress is None or not progress.current_page:
        return 0
    # half-up, like the library card shows it
    return int(progress.current_page * 100 / book.total_pages + 0.5)


def filter_books(
    books: Iterable[Book],
    progress: List[ReadingProgress],
    search: str = "",
    status: str = STATUS_ALL,
) -> List[Book]:
    term = (search or "").lower()
    out = []
    for book in books:
        if term not in book.title.lower() and term not in book.author.lower():
            continue
        if status != STATUS_ALL:
            p = progress_for(book.id, progress)
            book_status = p.status if p else ReadingStatus.NOT_STARTED
            if getattr(book_status, "value", book_status) != status:
                continue
        out.append(book)
    return out


def status_counts(books: List[Book], progress: List[ReadingProgress]) -> Dict[str, int]:
    return {
        STATUS_ALL: len(books),
        ReadingStatus.READING.value: sum(1 for p in progress if p.status == ReadingStatus.READING),
        ReadingStatus.COMPLETED.value: sum(1 for p in progress if p.status == ReadingStatus.COMPLETED),
        ReadingStatus.NOT_STARTED.value: len(books) - len(progress),
    }
