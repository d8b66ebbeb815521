"""Errors raised at the boundary of the resume tailoring helpers.

The text analysis functions themselves never raise; these cover document
loading and validation of payloads coming back from a language model.
"""
from __future__ import annotations


class ResumeTailorError(RuntimeError):
    """Base class for all resume_tailor errors."""


class DocumentExtractionError(ResumeTailorError):
    """Raised when a resume or job description file cannot be read."""


class InvalidTailorResponseError(ResumeTailorError):
    """Raised when a tailoring payload does not have the expected structure."""


class InputTooLargeError(ResumeTailorError):
    """Raised when an input text exceeds the configured length limit.

    Attributes:
        field: Name of the offending input, e.g. ``"resume"``
        length: Actual number of characters
        limit: Maximum number of characters allowed
    """

    def __init__(self, field: str, length: int, limit: int):
        self.field = field
        self.length = length
        self.limit = limit
        super().__init__(
            f"Input too large: {field} has {length:,} characters (max {limit:,})."
        )
