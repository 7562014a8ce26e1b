# Library records and list helpers.

from .types import Book, ReadingProgress, ReadingStatus
from .shelf import (
    BookFormError,
    book_from_form,
    filter_books,
    progress_for,
    progress_percentage,
    status_counts,
)

__all__ = [
    "Book",
    "ReadingProgress",
    "ReadingStatus",
    "BookFormError",
    "book_from_form",
    "filter_books",
    "progress_for",
    "progress_percentage",
    "status_counts",
]
