"""
API response models for the FastAPI application.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from enum import Enum

from pydantic import BaseModel, Field


class ResponseStatus(str, Enum):
    """Envelope status values."""
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


class ResponseEnvelope(BaseModel):
    """Response envelope shared by every book endpoint."""
    status: ResponseStatus = Field(..., description="Outcome of the request")
    message: Optional[str] = Field(None, description="Human-readable message")
    data: Optional[Dict[str, Any]] = Field(None, description="Response payload")

    def render(self) -> Dict[str, Any]:
        """Envelope as a JSON-ready dict without empty keys."""
        return self.model_dump(mode="json", exclude_none=True)


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    books_stored: int = Field(..., description="Number of books currently stored")
