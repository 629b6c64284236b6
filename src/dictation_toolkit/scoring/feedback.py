"""
Module: scoring.feedback

Purpose:
    Gap-by-gap feedback for display and export collaborators: what the
    student typed, the expected answer in its authored casing, the score
    and whether it counts as correct.

Key Functions:
    - build_feedback(): Feedback rows for a response

Key Classes:
    - GapFeedback: Immutable feedback row

Used By:
    - question.definition: DictationQuestion.feedback()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Sequence

from dictation_toolkit.core.models.gaps import Gap
from .config import ScoringConfig
from .scorer import score_gap


@dataclass(frozen=True)
class GapFeedback:
    """
    Feedback for one gap.

    Attributes:
        index: Gap position
        correct: Expected answer as authored. This is the alternative the
            student matched best, or the primary one if nothing matched.
        student: Raw student input
        score: Gap score in [0, 1]
        is_correct: score >= the configured correctness threshold
    """
    index: int
    correct: str
    student: str
    score: float
    is_correct: bool

    @property
    def percent(self) -> float:
        """Score as a percentage rounded to one decimal, e.g. 66.7."""
        return round(self.score * 100, 1)

    @property
    def label(self) -> str:
        return f"Gap {self.index + 1}"


def build_feedback(
    gaps: Sequence[Gap],
    responses: Mapping[int, str],
    config: ScoringConfig,
) -> List[GapFeedback]:
    """
    Build feedback rows for every gap.

    Args:
        gaps: Gaps in transcript order
        responses: Gap index -> student text (missing = empty)
        config: Scoring options, including the correctness threshold

    Returns:
        One GapFeedback per gap, in order
    """
    rows = []
    for gap in gaps:
        student = responses.get(gap.index, "") or ""
        result = score_gap(gap.alternatives, student, config)
        correct = result.matched_alternative(gap.alternatives) or gap.primary
        rows.append(
            GapFeedback(
                index=gap.index,
                correct=correct,
                student=student,
                score=result.score,
                is_correct=result.score >= config.correct_threshold,
            )
        )
    return rows
