"""
Module: extractor

Purpose:
    Authoring-time gap extraction. Parses [bracketed] spans from a
    transcript into Gap models; comma-separated spans give several
    accepted answers.

Key Functions:
    - extract(): Transcript -> ordered gaps
    - count_gaps(): Span count for form validation

Used By:
    - dictation_toolkit.question: DictationQuestion.from_transcript()
"""

from .gaps import (
    ExtractionError,
    NoGapsFound,
    count_gaps,
    extract,
    split_alternatives,
)

__all__ = [
    "ExtractionError",
    "NoGapsFound",
    "count_gaps",
    "extract",
    "split_alternatives",
]
