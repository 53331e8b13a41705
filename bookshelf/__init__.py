"""
Bookshelf package: in-memory book record keeping.

This package contains:
- Book record models
- Operation outcomes
- List query filters
- The BookStore holding the collection
"""

from bookshelf.models import Book, BookPayload, BookSummary
from bookshelf.outcome import Outcome, OutcomeKind
from bookshelf.query import BookFilter, parse_boolean_token
from bookshelf.store import BookStore

__version__ = "1.0.0"

__all__ = [
    "Book",
    "BookPayload",
    "BookSummary",
    "BookFilter",
    "BookStore",
    "Outcome",
    "OutcomeKind",
    "parse_boolean_token",
]
