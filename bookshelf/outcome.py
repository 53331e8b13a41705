"""
Operation outcomes returned by the book store.
"""

from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class OutcomeKind(str, Enum):
    """Kinds of operation results."""
    SUCCESS = "success"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"


class Outcome(BaseModel):
    """Tagged result of a store operation."""
    kind: OutcomeKind = Field(..., description="Result kind")
    status_code: int = Field(..., description="HTTP status code for the result")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[Dict[str, Any]] = Field(None, description="Operation payload")

    @classmethod
    def success(cls, message: Optional[str] = None, data: Optional[Dict[str, Any]] = None,
                status_code: int = 200) -> "Outcome":
        return cls(kind=OutcomeKind.SUCCESS, status_code=status_code, message=message, data=data)

    @classmethod
    def invalid_input(cls, message: str) -> "Outcome":
        return cls(kind=OutcomeKind.INVALID_INPUT, status_code=400, message=message)

    @classmethod
    def not_found(cls, message: str) -> "Outcome":
        return cls(kind=OutcomeKind.NOT_FOUND, status_code=404, message=message)

    @property
    def ok(self) -> bool:
        return self.kind == OutcomeKind.SUCCESS

    @property
    def status(self) -> str:
        """Envelope status string."""
        return "success" if self.ok else "fail"

    def to_envelope(self) -> Dict[str, Any]:
        """
        Render the response envelope.

        Returns:
            ``{"status": ..., "message": ..., "data": ...}`` without the
            keys that have no value
        """
        envelope: Dict[str, Any] = {"status": self.status}
        if self.message is not None:
            envelope["message"] = self.message
        if self.data is not None:
            envelope["data"] = self.data
        return envelope
