"""
Module: extractor.gaps

Purpose:
    Gap extraction - turns an authored transcript with [bracketed]
    words into the ordered list of gaps students fill in.

Key Functions:
    - extract(): Parse all gaps, failing if there are none
    - count_gaps(): Count bracketed spans without raising
    - split_alternatives(): Split a span's inner text into answers

Key Classes:
    - ExtractionError: Base error for transcript problems
    - NoGapsFound: Transcript contains no bracketed spans

Dependencies:
    - re (std)
    - dictation_toolkit.core.models.gaps: Gap dataclass

Used By:
    - question.definition: Builds questions from transcripts
    - core.utils.serialization: Regenerates gaps and decodes legacy values
"""

from __future__ import annotations

import logging
import re
from typing import List, Tuple

from dictation_toolkit.core.models.gaps import Gap

logger = logging.getLogger(__name__)

# A span closes at the first "]" after its "["; "[]" is not a span.
GAP_PATTERN = re.compile(r"\[([^\]]+)\]")

ALTERNATIVE_SEPARATOR = ","

NO_GAPS_MESSAGE = (
    "No gaps found in transcript. "
    "Please mark at least one word with square brackets [word]."
)


class ExtractionError(Exception):
    """Raised when a transcript cannot be turned into gaps."""


class NoGapsFound(ExtractionError):
    """Raised when a transcript contains no bracketed spans."""

    def __init__(self, message: str = NO_GAPS_MESSAGE):
        super().__init__(message)


def split_alternatives(text: str) -> Tuple[str, ...]:
    """
    Split a span's inner text into accepted answers.

    Args:
        text: Inner text of one bracketed span

    Returns:
        Trimmed alternatives in authored order. Text without a comma
        gives a single alternative.

    Example:
        >>> split_alternatives(" red, crimson ,scarlet")
        ('red', 'crimson', 'scarlet')
    """
    if ALTERNATIVE_SEPARATOR not in text:
        return (text.strip(),)
    return tuple(part.strip() for part in text.split(ALTERNATIVE_SEPARATOR))


def count_gaps(transcript: str) -> int:
    """Number of bracketed spans in the transcript."""
    return len(GAP_PATTERN.findall(transcript or ""))


def extract(transcript: str) -> List[Gap]:
    """
    Extract gaps from a transcript.

    Scans left to right for non-overlapping [..] spans. Nested brackets
    are not supported; a span ends at the first closing bracket.

    Args:
        transcript: Authored text, e.g. "The [cat] sat on the [mat]."

    Returns:
        Gaps indexed 0..N-1 in order of appearance

    Raises:
        NoGapsFound: If the transcript has no bracketed spans

    Example:
        >>> [g.alternatives for g in extract("The [cat] sat on the [mat].")]
        [('cat',), ('mat',)]
    """
    spans = GAP_PATTERN.findall(transcript or "")
    if not spans:
        raise NoGapsFound()

    gaps = []
    for index, inner in enumerate(spans):
        gap = Gap(index=index, alternatives=split_alternatives(inner))
        if gap.has_blank_alternative:
            logger.warning(
                f"Gap {index + 1} has an empty alternative: [{inner}]"
            )
        gaps.append(gap)

    logger.debug(f"Extracted {len(gaps)} gaps from transcript")
    return gaps
