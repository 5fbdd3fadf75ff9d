"""
trivia_session.errors — Custom exception classes
================================================

Defines the exception hierarchy raised by the session core and its
collaborators. Dataset load failures store full context for structured
logging.
"""

from __future__ import annotations
from typing import List, Optional


class TriviaSessionError(Exception):
    """Base exception for all trivia_session package errors."""
    pass


class InvalidArgumentError(TriviaSessionError, ValueError):
    """Raised when caller input is malformed or missing."""
    pass


class InvalidStateError(TriviaSessionError):
    """Raised when an operation is attempted in the wrong session status."""
    pass


class NotFoundError(TriviaSessionError, LookupError):
    """Raised when a category, or a category/value pair, does not resolve."""

    def __init__(self, category: str, value: Optional[int] = None):
        self.category = category
        self.value = value
        if value is None:
            super().__init__(f"Category not found: {category}")
        else:
            super().__init__(f"Question not found: {category} - {value}")


class DatasetLoadError(TriviaSessionError):
    """Raised when a question file cannot be read or fails validation."""

    def __init__(
        self,
        source: str,
        message: str,
        validation_errors: Optional[List[str]] = None,
    ):
        self.source = source
        self.message = message
        self.validation_errors = list(validation_errors or [])
        super().__init__(f"Could not load '{source}': {message}")

    def format_error_log(self) -> str:
        return _format_error_block(
            error_type="DATASET_LOAD_FAILURE",
            source=self.source,
            message=self.message,
            validation_errors=self.validation_errors,
        )


def _format_error_block(
    error_type: str,
    source: str,
    message: str,
    validation_errors: List[str],
) -> str:
    """Format a structured error block for the terminal."""
    from datetime import datetime, timezone

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"

    lines = [
        "",
        "=" * 64,
        " QUESTION DATA ERROR",
        "=" * 64,
        f" Timestamp:    {timestamp}",
        f" Error Type:   {error_type}",
        f" Source:       {source}",
        f" Message:      {message}",
    ]

    if validation_errors:
        lines.append("")
        lines.append(" ── VALIDATION ERRORS " + "─" * 42)
        for error in validation_errors:
            lines.append(f" • {error}")

    lines.append("")
    lines.append("=" * 64)
    lines.append("")

    return "\n".join(lines)
