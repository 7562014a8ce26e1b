# Record shapes owned by the managed data store (books, reading_progress).
# Only mirrored here so the client helpers can work with them.

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ReadingStatus(str, Enum):
    NOT_STARTED = "not_started"
    READING = "reading"
    COMPLETED = "completed"
    ON_HOLD = "on_hold"
    ABANDONED = "abandoned"


@dataclass
class Book:
    id: str
    title: str
    author: str
    user_id: Optional[str] = None
    total_pages: int = 0
    isbn: Optional[str] = None
    description: Optional[str] = None
    genre: Optional[str] = None
    published_year: Optional[int] = None
    cover_url: Optional[str] = None


@dataclass
class ReadingProgress:
    book_id: str
    current_page: int = 0
    status: ReadingStatus = ReadingStatus.NOT_STARTED
    rating: Optional[int] = None
    user_id: Optional[str] = None
