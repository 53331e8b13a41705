"""
Query filters for book listings.
"""

from typing import Optional
from pydantic import BaseModel, Field

from bookshelf.models import Book

# "0" = false, "1" = true
BOOLEAN_TOKENS = {"0": False, "1": True}


def parse_boolean_token(value: Optional[str]) -> Optional[bool]:
    """
    Parse a boolean query token.

    Args:
        value: Raw query string value

    Returns:
        True or False for a recognized token, None for anything else
    """
    if value is None:
        return None
    return BOOLEAN_TOKENS.get(value)


class BookFilter(BaseModel):
    """Active filters for a book listing. ``None`` means the filter is off."""
    name: Optional[str] = Field(None, description="Case-insensitive name substring")
    reading: Optional[bool] = Field(None, description="Filter by reading flag")
    finished: Optional[bool] = Field(None, description="Filter by finished flag")

    @classmethod
    def from_query(
        cls,
        name: Optional[str] = None,
        reading: Optional[str] = None,
        finished: Optional[str] = None
    ) -> "BookFilter":
        """Build a filter from raw query string values."""
        return cls(
            name=name,
            reading=parse_boolean_token(reading),
            finished=parse_boolean_token(finished),
        )

    def matches(self, book: Book) -> bool:
        if self.name is not None and self.name.strip().lower() not in book.name.lower():
            return False
        if self.reading is not None and book.reading != self.reading:
            return False
        if self.finished is not None and book.finished != self.finished:
            return False
        return True

    def active(self) -> dict:
        """Filters that are switched on."""
        return self.model_dump(exclude_none=True)
