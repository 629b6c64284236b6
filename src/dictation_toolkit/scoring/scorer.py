"""
Module: scoring.scorer

Purpose:
    Grades student input against gaps. Each gap is scored against every
    accepted alternative and keeps the best; the response grade is a
    weighted mean of the gap scores.

Key Functions:
    - score_gap(): Score one input against a gap's alternatives
    - score_all(): Score a full response and aggregate
    - gap_weight(): Weight of one gap under a weighting mode

Dependencies:
    - dictation_toolkit.scoring.distance: normalize, similarity
    - dictation_toolkit.scoring.config: ScoringConfig

Used By:
    - scoring.feedback: Per-gap feedback
    - question.definition: DictationQuestion.grade()

Design:
    Pure functions, no state between calls. Safe to call from many
    grading requests at once.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from dictation_toolkit.core.models.gaps import Gap
from dictation_toolkit.core.models.scoring import GapScore, GradeResult
from .config import ScoringConfig, ScoringPolicy, Weighting
from .distance import normalize, similarity

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = ScoringConfig()


def _score_alternative(alternative: str, student: str, policy: ScoringPolicy) -> float:
    """Score normalized input against one normalized alternative."""
    if not alternative and not student:
        return 1.0
    if not alternative or not student:
        return 0.0
    if alternative == student:
        return 1.0
    if policy == ScoringPolicy.EXACT:
        return 0.0
    return similarity(alternative, student)


def score_gap(
    alternatives: Sequence[str],
    student_input: Optional[str],
    config: ScoringConfig = _DEFAULT_CONFIG,
) -> GapScore:
    """
    Score one student input against a gap's accepted answers.

    Both sides are lower-cased and trimmed before comparison. The best
    alternative wins; on a tie the earlier alternative is reported.

    Args:
        alternatives: Accepted answers, primary first
        student_input: Raw text the student entered (None = empty)
        config: Scoring policy

    Returns:
        GapScore with the best score and the index of the alternative
        that produced it (None when the score is 0.0)

    Raises:
        ValueError: If alternatives is empty

    Example:
        >>> score_gap(["cat"], "hat").score
        0.6666666666666667
    """
    if not alternatives:
        raise ValueError("Cannot score a gap without alternatives")

    student = normalize(student_input)
    best_score = 0.0
    best_index: Optional[int] = None

    for index, alternative in enumerate(alternatives):
        score = _score_alternative(normalize(alternative), student, config.policy)
        if score == 1.0:
            return GapScore(score=1.0, alternative_index=index)
        if score > best_score:
            best_score = score
            best_index = index

    return GapScore(score=best_score, alternative_index=best_index)


def gap_weight(gap: Gap, weighting: Weighting) -> float:
    """
    Contribution weight of a gap to the aggregate.

    Uniform weighting gives every gap 1.0; length weighting uses the
    character count of the primary alternative as authored.
    """
    if weighting == Weighting.LENGTH_WEIGHTED:
        return float(len(gap.primary))
    return 1.0


def score_all(
    gaps: Sequence[Gap],
    responses: Mapping[int, str],
    config: ScoringConfig = _DEFAULT_CONFIG,
) -> GradeResult:
    """
    Score every gap and combine into a weighted aggregate.

    Args:
        gaps: Gaps in transcript order
        responses: Gap index -> student text. Missing gaps count as empty.
        config: Scoring policy and weighting

    Returns:
        GradeResult(aggregate, gap_scores). The aggregate is 0.0 when
        there are no gaps or the total weight is zero.

    Example:
        >>> gaps = extract("The [cat] sat on the [mat].")
        >>> aggregate, scores = score_all(gaps, {0: "cat"}, ScoringConfig.exact())
        >>> aggregate
        0.5
    """
    if not gaps:
        return GradeResult.empty()

    gap_scores = []
    total_weight = 0.0
    weighted_sum = 0.0

    for gap in gaps:
        student = responses.get(gap.index, "") if responses else ""
        gap_score = score_gap(gap.alternatives, student, config)
        weight = gap_weight(gap, config.weighting)

        total_weight += weight
        weighted_sum += gap_score.score * weight
        gap_scores.append(gap_score)

    aggregate = weighted_sum / total_weight if total_weight > 0 else 0.0

    logger.debug(
        f"Scored {len(gap_scores)} gaps ({config.policy.value}, "
        f"{config.weighting.value}): aggregate={aggregate:.4f}"
    )
    return GradeResult(aggregate=aggregate, gap_scores=tuple(gap_scores))
