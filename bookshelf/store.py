"""
In-memory book store.

The store owns an ordered collection of book records and exposes the
five record operations. Caller mistakes come back as ``Outcome`` values
instead of exceptions.
"""

import secrets
import string
import threading
from typing import Callable, Iterable, List, Optional

from bookshelf.models import Book, BookPayload, BookSummary
from bookshelf.outcome import Outcome
from bookshelf.query import BookFilter
from utilities.logger import StoreLogger

# URL-safe alphabet, 64 symbols
ID_ALPHABET = string.ascii_letters + string.digits + "_-"

Guard = Callable[[BookPayload], Optional[str]]


def require_name(payload: BookPayload) -> Optional[str]:
    if not payload.name:
        return "name required"
    return None


def require_read_page_within_page_count(payload: BookPayload) -> Optional[str]:
    if payload.read_page > payload.page_count:
        return "readPage exceeds pageCount"
    return None


CREATE_GUARDS: List[Guard] = [require_name, require_read_page_within_page_count]
UPDATE_GUARDS: List[Guard] = [require_read_page_within_page_count, require_name]


def first_failure(guards: Iterable[Guard], payload: BookPayload) -> Optional[str]:
    """Run guards in order and return the first failure message."""
    for guard in guards:
        failure = guard(payload)
        if failure:
            return failure
    return None


def generate_book_id(length: int = 16) -> str:
    """Generate a random book id."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


class BookStore:
    """Ordered in-memory collection of books guarded by a lock."""

    def __init__(self, id_length: int = 16, logger: Optional[StoreLogger] = None):
        self.id_length = id_length
        self.logger = logger or StoreLogger()
        self._books: List[Book] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _find_index(self, book_id: str) -> int:
        for index, book in enumerate(self._books):
            if book.id == book_id:
                return index
        return -1

    def _new_id(self) -> str:
        book_id = generate_book_id(self.id_length)
        while self._find_index(book_id) != -1:
            book_id = generate_book_id(self.id_length)
        return book_id

    def create(self, payload: BookPayload) -> Outcome:
        """
        Add a book to the end of the collection.

        Args:
            payload: Caller-supplied book fields

        Returns:
            Outcome with ``{"bookId": ...}`` on success (201), or an
            invalid-input outcome (400) naming the first violated rule
        """
        failure = first_failure(CREATE_GUARDS, payload)
        if failure:
            outcome = Outcome.invalid_input(f"Failed to add book: {failure}")
            self.logger.log_outcome("create", outcome)
            return outcome

        with self._lock:
            book = Book.from_payload(self._new_id(), payload)
            self._books.append(book)

        outcome = Outcome.success(
            message="Book added successfully",
            data={"bookId": book.id},
            status_code=201,
        )
        self.logger.log_outcome("create", outcome, book_id=book.id)
        return outcome

    def list_books(self, book_filter: Optional[BookFilter] = None) -> List[BookSummary]:
        """Summaries of the books passing every active filter, in insertion order."""
        book_filter = book_filter or BookFilter()
        with self._lock:
            total = len(self._books)
            summaries = [book.summary_view() for book in self._books if book_filter.matches(book)]
        self.logger.log_listing(total=total, matched=len(summaries), filters=book_filter.active())
        return summaries

    def list(self, book_filter: Optional[BookFilter] = None) -> Outcome:
        summaries = self.list_books(book_filter)
        return Outcome.success(data={"books": [summary.to_json() for summary in summaries]})

    def get(self, book_id: str) -> Outcome:
        with self._lock:
            index = self._find_index(book_id)
            book = self._books[index].to_json() if index != -1 else None

        if book is None:
            outcome = Outcome.not_found("Book not found")
        else:
            outcome = Outcome.success(data={"book": book})
        self.logger.log_outcome("get", outcome, book_id=book_id)
        return outcome

    def update(self, book_id: str, payload: BookPayload) -> Outcome:
        """
        Replace the mutable fields of a book.

        Field checks run before the id lookup, so invalid fields on an
        unknown id report invalid input. ``finished`` keeps the value it
        got when the book was added.
        """
        failure = first_failure(UPDATE_GUARDS, payload)
        if failure:
            outcome = Outcome.invalid_input(f"Failed to update book: {failure}")
            self.logger.log_outcome("update", outcome, book_id=book_id)
            return outcome

        with self._lock:
            index = self._find_index(book_id)
            if index != -1:
                self._books[index].apply(payload)

        if index == -1:
            outcome = Outcome.not_found("Failed to update book: id not found")
        else:
            outcome = Outcome.success(message="Book updated successfully")
        self.logger.log_outcome("update", outcome, book_id=book_id)
        return outcome

    def delete(self, book_id: str) -> Outcome:
        with self._lock:
            index = self._find_index(book_id)
            if index != -1:
                del self._books[index]

        if index == -1:
            outcome = Outcome.not_found("Failed to delete book: id not found")
        else:
            outcome = Outcome.success(message="Book deleted successfully")
        self.logger.log_outcome("delete", outcome, book_id=book_id)
        return outcome

    def stats(self) -> dict:
        """Counts of stored, reading and finished books."""
        with self._lock:
            return {
                "total_books": len(self._books),
                "reading_books": sum(1 for book in self._books if book.reading),
                "finished_books": sum(1 for book in self._books if book.finished),
            }
