"""
Module: question.definition

Purpose:
    The dictation question as the grading pipeline sees it: transcript,
    extracted gaps, audio settings and scoring options, plus the
    response helpers the host calls around grading.

Key Classes:
    - DisplayMode: How gaps are laid out for the student
    - DictationQuestion: Immutable question definition

Dependencies:
    - dictation_toolkit.extractor: Gap extraction
    - dictation_toolkit.scoring: Scoring and feedback

Used By:
    - core.utils.serialization: Question payload codec

Response format:
    Host form data uses one key per gap, "gap_0" .. "gap_<N-1>", and a
    "playcount" key when audio is enabled.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Tuple

from dictation_toolkit.core.models.gaps import Gap
from dictation_toolkit.core.models.scoring import GradeResult
from dictation_toolkit.extractor import extract
from dictation_toolkit.scoring import GapFeedback, ScoringConfig, build_feedback, score_all

logger = logging.getLogger(__name__)

GAP_KEY_PREFIX = "gap_"
PLAY_COUNT_KEY = "playcount"
UNLIMITED_PLAYS = 0

ENTER_ANSWER_MESSAGE = "Please enter an answer."


class DisplayMode(Enum):
    """Gap layout shown to the student."""
    STANDARD = "standard"
    INLINE = "inline"


@dataclass(frozen=True)
class DictationQuestion:
    """
    A dictation (or C-test, without audio) question.

    Attributes:
        transcript: Authored text with [bracketed] gaps
        gaps: Gaps extracted from the transcript
        enable_audio: Whether an audio clip accompanies the question
        max_plays: Allowed audio plays, 0 for unlimited
        display_mode: Gap layout
        scoring: Scoring options

    Invariants:
        - gaps is non-empty and indexed 0..N-1
        - max_plays >= 0

    Example:
        >>> q = DictationQuestion.from_transcript("She [went] to the [store].")
        >>> q.correct_response()
        {'gap_0': 'went', 'gap_1': 'store'}
    """
    transcript: str
    gaps: Tuple[Gap, ...]
    enable_audio: bool = False
    max_plays: int = UNLIMITED_PLAYS
    display_mode: DisplayMode = DisplayMode.STANDARD
    scoring: ScoringConfig = field(default_factory=ScoringConfig)

    def __post_init__(self) -> None:
        """Validate question on construction."""
        if not isinstance(self.gaps, tuple):
            object.__setattr__(self, "gaps", tuple(self.gaps))
        if not self.gaps:
            raise ValueError("Question must have at least one gap")
        indices = [g.index for g in self.gaps]
        if indices != list(range(len(self.gaps))):
            raise ValueError(f"Gap indices must be 0..N-1 in order, got {indices}")
        if self.max_plays < 0:
            raise ValueError(f"max_plays cannot be negative: {self.max_plays}")

    @classmethod
    def from_transcript(cls, transcript: str, **options: Any) -> DictationQuestion:
        """
        Build a question by extracting gaps from the transcript.

        Raises:
            NoGapsFound: If the transcript has no bracketed spans
        """
        return cls(transcript=transcript, gaps=tuple(extract(transcript)), **options)

    # ─────────────────────────────────────────────────────────────────────────
    # Response Keys
    # ─────────────────────────────────────────────────────────────────────────

    @staticmethod
    def gap_key(index: int) -> str:
        return f"{GAP_KEY_PREFIX}{index}"

    @property
    def gap_count(self) -> int:
        return len(self.gaps)

    def expected_keys(self) -> List[str]:
        """Response keys the host form submits for this question."""
        keys = [self.gap_key(g.index) for g in self.gaps]
        if self.enable_audio:
            keys.append(PLAY_COUNT_KEY)
        return keys

    def responses_from_form(self, form: Mapping[str, Any]) -> Dict[int, str]:
        """Map "gap_<i>" form values to gap index -> text, trimming edges."""
        responses = {}
        for gap in self.gaps:
            value = form.get(self.gap_key(gap.index))
            if value is not None:
                responses[gap.index] = str(value).strip()
        return responses

    def correct_response(self) -> Dict[str, str]:
        """Form data that answers every gap with its primary alternative."""
        return {self.gap_key(g.index): g.primary for g in self.gaps}

    # ─────────────────────────────────────────────────────────────────────────
    # Response State
    # ─────────────────────────────────────────────────────────────────────────

    def _answers(self, form: Mapping[str, Any]) -> List[str]:
        return [str(form.get(self.gap_key(g.index), "") or "").strip() for g in self.gaps]

    def is_complete_response(self, form: Mapping[str, Any]) -> bool:
        """True if every gap has a non-empty answer."""
        return all(answer != "" for answer in self._answers(form))

    def is_gradable_response(self, form: Mapping[str, Any]) -> bool:
        """True if at least one gap has a non-empty answer."""
        return any(answer != "" for answer in self._answers(form))

    def validation_error(self, form: Mapping[str, Any]) -> str:
        if not self.is_gradable_response(form):
            return ENTER_ANSWER_MESSAGE
        return ""

    def summarise_response(self, form: Mapping[str, Any]) -> str:
        """Non-empty answers joined by commas, in gap order."""
        return ", ".join(a for a in self._answers(form) if a != "")

    def is_same_response(self, previous: Mapping[str, Any], new: Mapping[str, Any]) -> bool:
        """
        Compare two submissions.

        Play counts only matter when audio is enabled.
        """
        if self._answers(previous) != self._answers(new):
            return False
        if self.enable_audio:
            return _play_count(previous) == _play_count(new)
        return True

    def can_play(self, play_count: int) -> bool:
        """Whether the audio may be played again after play_count plays."""
        if not self.enable_audio:
            return False
        return self.max_plays == UNLIMITED_PLAYS or play_count < self.max_plays

    # ─────────────────────────────────────────────────────────────────────────
    # Grading
    # ─────────────────────────────────────────────────────────────────────────

    def grade(self, form: Mapping[str, Any]) -> GradeResult:
        """Grade host form data."""
        result = score_all(self.gaps, self.responses_from_form(form), self.scoring)
        logger.debug(f"Graded response: {result.aggregate:.4f} over {self.gap_count} gaps")
        return result

    def feedback(self, form: Mapping[str, Any]) -> List[GapFeedback]:
        return build_feedback(self.gaps, self.responses_from_form(form), self.scoring)


def _play_count(form: Mapping[str, Any]) -> Any:
    """Play count as an int, or the raw value when it is not numeric."""
    value = form.get(PLAY_COUNT_KEY, 0)
    try:
        return int(value)
    except (TypeError, ValueError):
        return value
