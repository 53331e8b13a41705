"""
Pytest configuration and shared fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from bookshelf.models import BookPayload
from bookshelf.store import BookStore


@pytest.fixture
def book_store():
    """Create an empty book store."""
    return BookStore()


@pytest.fixture
def client(book_store):
    """Create test client serving the book_store fixture."""
    return TestClient(create_app(book_store=book_store))


@pytest.fixture
def sample_book_data():
    """Sample create/update request body."""
    return {
        "name": "Buku A",
        "year": 2010,
        "author": "John Doe",
        "summary": "Lorem ipsum dolor sit amet",
        "publisher": "Dicoding Indonesia",
        "pageCount": 100,
        "readPage": 25,
        "reading": False
    }


@pytest.fixture
def sample_payload(sample_book_data):
    """Sample payload as a model."""
    return BookPayload(**sample_book_data)


@pytest.fixture
def add_book(book_store):
    """Add a book to the store and return its id."""
    def _add(name="Buku A", page_count=100, read_page=0, reading=False, publisher="Dicoding", **fields):
        outcome = book_store.create(BookPayload(
            name=name,
            page_count=page_count,
            read_page=read_page,
            reading=reading,
            publisher=publisher,
            **fields
        ))
        assert outcome.ok, outcome.message
        return outcome.data["bookId"]
    return _add
