"""
Haste Store — Pydantic Response Schemas
=========================================

What:  Pydantic models defining the JSON shapes the service returns.
Why:   The paste clients depend on these exact shapes; declaring them keeps the
       field names and order fixed (`data` before `key` in a Document).
Who:   Built by the document handlers and the health route.
"""

from typing import Optional

from pydantic import BaseModel, Field


NOT_FOUND_MESSAGE = "Document not found."


class Document(BaseModel):
    """
    What:  A stored paste and its key.
    Who:   Returned by DocumentStore.get and serialized by GET /documents/<id>.

    Invariant: `key` is the lowercase form of the lookup key; `data` is the
    stored text verbatim (an empty string is a valid document).
    """
    data: str = Field(description="Raw document text")
    key: str = Field(description="Lowercase document key")


class CreateDocumentResponse(BaseModel):
    """Returned by POST /documents."""
    key: str = Field(description="Generated key for the new document")


class MessageResponse(BaseModel):
    """
    Informational body used for document lookup misses.

    Sent with status 200: clients detect a miss by the `message` field, not by
    the status code.
    """
    message: str = Field(default=NOT_FOUND_MESSAGE)


class ErrorResponse(BaseModel):
    """
    Standardized error body for server failures.

    Example:
        {
            "error": "store_error",
            "message": "The document store is unavailable. Please try again later.",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and backing store status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store_backend: str = Field(description="KeyValueStore implementation in use")
    store: str = Field(description="Backing store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
