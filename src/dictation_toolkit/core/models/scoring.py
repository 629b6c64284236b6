"""
Module: scoring (models)

Purpose:
    Result types produced by the scorer. Kept separate from the scoring
    functions so export and feedback code can depend on the shapes
    without importing the algorithm.

Key Classes:
    - GapScore: Score for a single gap plus the winning alternative
    - GradeResult: Weighted aggregate and per-gap scores

Dependencies:
    - dataclasses (std)

Used By:
    - scoring.scorer
    - scoring.feedback
    - question.definition
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class GapScore:
    """
    Result of scoring one gap.

    Attributes:
        score: Value in [0, 1]
        alternative_index: Index of the alternative that produced the best
            match, or None when nothing matched (score 0.0)

    Invariants:
        - 0.0 <= score <= 1.0
        - alternative_index is None or >= 0

    Example:
        >>> GapScore(1.0, 1).matched_alternative(("red", "crimson"))
        'crimson'
    """

    score: float
    alternative_index: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate score range on construction."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Gap score out of range: {self.score}")
        if self.alternative_index is not None and self.alternative_index < 0:
            raise ValueError(f"Invalid alternative index: {self.alternative_index}")

    @classmethod
    def unmatched(cls) -> GapScore:
        """Zero score with no matching alternative."""
        return cls(score=0.0, alternative_index=None)

    @property
    def is_perfect(self) -> bool:
        return self.score == 1.0

    def matched_alternative(self, alternatives: Sequence[str]) -> Optional[str]:
        """
        Look up the winning alternative in its original casing.

        Args:
            alternatives: The alternatives the score was computed against

        Returns:
            The matched alternative, or None if nothing matched
        """
        if self.alternative_index is None:
            return None
        return alternatives[self.alternative_index]


@dataclass(frozen=True, slots=True)
class GradeResult:
    """
    Aggregate grade for one response set.

    Unpacks like the ``(aggregate, gap_scores)`` pair the grading
    pipeline expects:

        >>> aggregate, gap_scores = GradeResult(0.5, (GapScore(0.5, 0),))
        >>> aggregate
        0.5

    Attributes:
        aggregate: Weighted mean of gap scores in [0, 1]
        gap_scores: Per-gap scores in gap order
    """

    aggregate: float
    gap_scores: Tuple[GapScore, ...] = ()

    def __post_init__(self) -> None:
        if not 0.0 <= self.aggregate <= 1.0:
            raise ValueError(f"Aggregate score out of range: {self.aggregate}")

    def __iter__(self) -> Iterator:
        yield self.aggregate
        yield self.gap_scores

    @classmethod
    def empty(cls) -> GradeResult:
        """Result for a question without gaps."""
        return cls(aggregate=0.0, gap_scores=())
