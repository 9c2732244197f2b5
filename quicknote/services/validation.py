"""
QuickNote Backend: Note Validation Pipeline
==============================================

What:  Gate-keeps every write path (create and update) with an ordered,
       short-circuiting sequence of checks, then normalizes accepted input.
How:   Pure function over (title, content, limits). The first failing check
       raises ValidationError; later checks are skipped.
Who:   Called by NoteService.create_note() and NoteService.update_note().

Check Order:
    1. Presence          → "Title and content are required"
    2. Title not blank   → "Title cannot be empty"
    3. Content not blank → "Content cannot be empty"
    4. Title length      → "Title must be {max_title} characters or less"
    5. Content length    → "Content must be {max_content} characters or less"
    6. Sanitize          → strip `<...>` tags (never fails)

    Clients rely on receiving the FIRST applicable error, so the order is
    part of the API contract. Length checks run on the trimmed value.
"""

import re
from dataclasses import dataclass
from typing import Optional

from quicknote.exceptions import ValidationError, ValidationFailureKind

# Everything from "<" up to the first ">"; text between tags is kept
_HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


@dataclass(frozen=True)
class ValidationLimits:
    """Maximum accepted lengths, measured after trimming."""

    max_title: int = 255
    max_content: int = 10_000


@dataclass(frozen=True)
class NormalizedNote:
    """Trimmed, tag-stripped title/content pair ready for the store."""

    title: str
    content: str


def sanitize(value: str) -> str:
    """
    Remove HTML tag markup from user-supplied text.

    Only the tags themselves are removed:
        'Test <script>alert("xss")</script> Note' → 'Test alert("xss") Note'
    """
    return _HTML_TAG_PATTERN.sub("", value)


def validate_and_normalize(
    title: Optional[str],
    content: Optional[str],
    limits: ValidationLimits,
) -> NormalizedNote:
    """
    Run the validation pipeline and return the normalized note fields.

    Args:
        title:   Raw title from the request body (None when absent)
        content: Raw content from the request body (None when absent)
        limits:  Length bounds to enforce

    Returns:
        NormalizedNote with trimmed, sanitized title and content

    Raises:
        ValidationError: carrying the kind and message of the first failing check
    """
    # None and "" are both "missing"; whitespace-only strings fall through
    # to the blank checks below
    if not title or not content:
        raise ValidationError(
            message="Title and content are required",
            kind=ValidationFailureKind.MISSING_FIELDS,
        )

    trimmed_title = title.strip()
    trimmed_content = content.strip()

    if not trimmed_title:
        raise ValidationError(
            message="Title cannot be empty",
            kind=ValidationFailureKind.EMPTY_TITLE,
        )

    if not trimmed_content:
        raise ValidationError(
            message="Content cannot be empty",
            kind=ValidationFailureKind.EMPTY_CONTENT,
        )

    if len(trimmed_title) > limits.max_title:
        raise ValidationError(
            message=f"Title must be {limits.max_title} characters or less",
            kind=ValidationFailureKind.TITLE_TOO_LONG,
            context={"length": len(trimmed_title)},
        )

    if len(trimmed_content) > limits.max_content:
        raise ValidationError(
            message=f"Content must be {limits.max_content} characters or less",
            kind=ValidationFailureKind.CONTENT_TOO_LONG,
            context={"length": len(trimmed_content)},
        )

    return NormalizedNote(
        title=sanitize(trimmed_title),
        content=sanitize(trimmed_content),
    )
