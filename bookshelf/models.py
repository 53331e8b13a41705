"""
Pydantic models for book records.
Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class BookPayload(BaseModel):
    """
    Caller-supplied fields for creating or updating a book.

    ``name`` may be missing here; the store reports it as invalid input
    rather than rejecting the request outright.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: Optional[str] = Field(None, description="Name of the book")
    year: Optional[Any] = Field(None, description="Publication year, stored as sent")
    author: Optional[Any] = Field(None, description="Book author")
    summary: Optional[Any] = Field(None, description="Short summary")
    publisher: Optional[Any] = Field(None, description="Book publisher")
    page_count: int = Field(0, ge=0, description="Total number of pages")
    read_page: int = Field(0, ge=0, description="Pages read so far")
    reading: bool = Field(False, description="Whether the book is currently being read")


class Book(BaseModel):
    """A stored book record."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Unique book identifier")
    name: str = Field(..., description="Name of the book")
    year: Optional[Any] = None
    author: Optional[Any] = None
    summary: Optional[Any] = None
    publisher: Optional[Any] = None
    page_count: int = Field(0, ge=0)
    read_page: int = Field(0, ge=0)
    finished: bool = Field(False, description="readPage == pageCount when the book was added")
    reading: bool = False
    inserted_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @classmethod
    def from_payload(cls, book_id: str, payload: BookPayload) -> "Book":
        """Build a new record, deriving ``finished`` and stamping timestamps."""
        now = utc_now()
        return cls(
            id=book_id,
            name=payload.name,
            year=payload.year,
            author=payload.author,
            summary=payload.summary,
            publisher=payload.publisher,
            page_count=payload.page_count,
            read_page=payload.read_page,
            finished=payload.page_count == payload.read_page,
            reading=payload.reading,
            inserted_at=now,
            updated_at=now,
        )

    def apply(self, payload: BookPayload) -> None:
        """Replace the mutable fields in place. ``finished`` is left as it was."""
        self.name = payload.name
        self.year = payload.year
        self.author = payload.author
        self.summary = payload.summary
        self.publisher = payload.publisher
        self.page_count = payload.page_count
        self.read_page = payload.read_page
        self.reading = payload.reading
        self.updated_at = utc_now()

    def summary_view(self) -> "BookSummary":
        return BookSummary(id=self.id, name=self.name, publisher=self.publisher)

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class BookSummary(BaseModel):
    """Reduced projection used by book listings."""
    id: str
    name: str
    publisher: Optional[Any] = None

    def to_json(self) -> dict:
        """Summary without the publisher key when none was given."""
        return self.model_dump(mode="json", exclude_none=True)
