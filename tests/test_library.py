import pytest

from litbot.library import (
    Book,
    BookFormError,
    ReadingProgress,
    ReadingStatus,
    book_from_form,
    filter_books,
    progress_for,
    progress_percentage,
    status_counts,
)
from litbot.library.shelf import DEFAULT_COVER_URL

BOOKS = [
    Book(id="b1", title="Moby-Dick", author="Herman Melville", total_pages=635),
    Book(id="b2", title="Beloved", author="Toni Morrison", total_pages=324),
    Book(id="b3", title="Middlemarch", author="George Eliot", total_pages=880),
]
PROGRESS = [
    ReadingProgress(book_id="b1", current_page=200, status=ReadingStatus.READING),
    ReadingProgress(book_id="b2", current_page=324, status=ReadingStatus.COMPLETED, rating=5),
]


def test_book_from_form_normalizes_fields():
    row = book_from_form(
        {"title": "  Beloved ", "author": "Toni Morrison", "total_pages": "324", "isbn": " ", "published_year": "1987"},
        user_id="u1",
    )
    assert row == {
        "user_id": "u1",
        "title": "Beloved",
        "author": "Toni Morrison",
        "total_pages": 324,
        "isbn": None,
        "description": None,
        "genre": None,
        "published_year": 1987,
        "cover_url": DEFAULT_COVER_URL,
    }


def test_book_from_form_blank_pages_is_zero():
    row = book_from_form({"title": "A", "author": "B", "total_pages": ""}, user_id="u1")
    assert row["total_pages"] == 0
    assert row["published_year"] is None


@pytest.mark.parametrize("form", [{"title": "A"}, {"author": "B"}, {"title": " ", "author": "B"}])
def test_book_from_form_requires_title_and_author(form):
    with pytest.raises(BookFormError, match="title and author"):
        book_from_form(form, user_id="u1")


def test_book_from_form_accepts_non_string_values():
    row = book_from_form(
        {"title": "Oliver Twist", "author": "Charles Dickens", "isbn": 9780141439518, "genre": 7},
        user_id="u1",
    )
    assert row["isbn"] == "9780141439518"
    assert row["genre"] == "7"


@pytest.mark.parametrize("pages, expected", [("300 pages", 300), ("12.0", 12), (12.0, 12), (" 88 ", 88)])
def test_book_from_form_keeps_leading_whole_number(pages, expected):
    row = book_from_form({"title": "A", "author": "B", "total_pages": pages}, user_id="u1")
    assert row["total_pages"] == expected


def test_book_from_form_requires_user():
    with pytest.raises(BookFormError):
        book_from_form({"title": "A", "author": "B"}, user_id="")


def test_book_from_form_rejects_bad_number():
    with pytest.raises(BookFormError):
        book_from_form({"title": "A", "author": "B", "total_pages": "many"}, user_id="u1")


def test_progress_percentage():
    assert progress_percentage(BOOKS[0], PROGRESS[0]) == 31
    assert progress_percentage(BOOKS[1], PROGRESS[1]) == 100
    assert progress_percentage(BOOKS[2], None) == 0
    assert progress_percentage(Book(id="x", title="t", author="a"), PROGRESS[0]) == 0


def test_filter_books_by_search():
    assert [b.id for b in filter_books(BOOKS, PROGRESS, search="MELV")] == ["b1"]
    assert [b.id for b in filter_books(BOOKS, PROGRESS, search="")] == ["b1", "b2", "b3"]


def test_filter_books_by_status():
    assert [b.id for b in filter_books(BOOKS, PROGRESS, status="reading")] == ["b1"]
    assert [b.id for b in filter_books(BOOKS, PROGRESS, status="completed")] == ["b2"]
    assert [b.id for b in filter_books(BOOKS, PROGRESS, status="not_started")] == ["b3"]


def test_filter_books_accepts_raw_status_strings():
    progress = [ReadingProgress(book_id="b3", status="on_hold")]
    assert [b.id for b in filter_books(BOOKS, progress, status="on_hold")] == ["b3"]


def test_status_counts():
    assert status_counts(BOOKS, PROGRESS) == {"all": 3, "reading": 1, "completed": 1, "not_started": 1}


def test_progress_for():
    assert progress_for("b2", PROGRESS).rating == 5
    assert progress_for("b3", PROGRESS) is None
