"""
QuickNote Backend: Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` with the matching HTTP status code.
Who:   Raised by the validation pipeline and NoteService; caught by global handlers.

Exception Hierarchy:
    QuickNoteError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

The `message` of every exception is safe to return to the client.
The `context` dict is logged server-side only.
"""

from enum import Enum
from typing import Any, Dict, Optional


class QuickNoteError(Exception):
    """
    Base exception for all QuickNote application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationFailureKind(str, Enum):
    """Which check of the validation pipeline rejected the input."""

    MISSING_FIELDS = "missing_fields"
    EMPTY_TITLE = "empty_title"
    EMPTY_CONTENT = "empty_content"
    TITLE_TOO_LONG = "title_too_long"
    CONTENT_TOO_LONG = "content_too_long"


class ValidationError(QuickNoteError):
    """
    Raised when note input fails validation.

    What:    The client sent a title/content pair that can be corrected.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Title must be 255 characters or less"}
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        kind: Optional[ValidationFailureKind] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if kind:
            ctx["kind"] = kind.value
        super().__init__(message=message, context=ctx)
        self.kind = kind


class NotFoundError(QuickNoteError):
    """
    Raised when a requested note does not exist.

    HTTP:    404 Not Found

    Stores return None for missing records. NoteService converts that None
    into this exception so the route layer never sees a bare None.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(QuickNoteError):
    """
    Raised when a note store operation fails unexpectedly.

    HTTP:    500 Internal Server Error

    Security Note:
        The message is always generic and operation-specific
        (e.g. "Failed to create note"). Driver errors, SQL text and
        constraint names are logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
