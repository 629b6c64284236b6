"""
Serialization Utilities

To/from JSON utilities for gaps and question options.

Stored gap lists come in two shapes:
- Current: each gap is a list of accepted answers
- Legacy: each gap is a bare string (the trimmed bracket text)

Both are normalized here into Gap models with a tuple of alternatives,
so nothing past this boundary needs to care which shape was stored.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Sequence, Union

from dictation_toolkit.core.models.gaps import Gap
from dictation_toolkit.core.schemas.validator import (
    ValidationError,
    validate_gaps,
    validate_question,
)
from dictation_toolkit.extractor import extract, split_alternatives
from dictation_toolkit.question.definition import DictationQuestion, DisplayMode
from dictation_toolkit.scoring.config import ScoringConfig

logger = logging.getLogger(__name__)

GapEntry = Union[str, Sequence[str]]


# ─────────────────────────────────────────────────────────────────────────────
# Gap Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_gaps(gaps: Sequence[Gap]) -> List[List[str]]:
    """
    Serialize gaps to plain lists.

    Always writes the current (list) shape.
    """
    return [gap.to_list() for gap in gaps]


def deserialize_gaps(data: Sequence[GapEntry], *, validate: bool = True) -> List[Gap]:
    """
    Deserialize a stored gap list.

    Args:
        data: Decoded JSON list of gap entries
        validate: Whether to validate the structure first

    Returns:
        Gaps indexed by list position

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_gaps(data)

    gaps = []
    legacy = 0
    for index, entry in enumerate(data):
        if isinstance(entry, str):
            alternatives = split_alternatives(entry)
            legacy += 1
        else:
            alternatives = tuple(entry)
        gaps.append(Gap(index=index, alternatives=alternatives))

    if legacy:
        logger.debug(f"Normalized {legacy} legacy string gap(s)")
    return gaps


def gaps_to_json(gaps: Sequence[Gap]) -> str:
    return json.dumps(serialize_gaps(gaps), ensure_ascii=False)


def gaps_from_json(text: str, *, validate: bool = True) -> List[Gap]:
    """
    Decode a JSON gap list.

    Raises:
        ValidationError: If the text is not valid JSON or fails validation
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid gaps JSON: {e}", path="gaps") from e
    return deserialize_gaps(data, validate=validate)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: DictationQuestion) -> dict[str, Any]:
    """
    Serialize a question to its options dictionary.

    The output passes validate_question(strict=True).
    """
    return {
        "transcript": question.transcript,
        "gaps": serialize_gaps(question.gaps),
        "enableaudio": question.enable_audio,
        "maxplays": question.max_plays,
        "displaymode": question.display_mode.value,
        "scoring": question.scoring.to_dict(),
    }


def deserialize_question(data: dict[str, Any], *, validate: bool = True) -> DictationQuestion:
    """
    Deserialize a question from its options dictionary.

    The "gaps" value may be a list or a JSON-encoded string. When it is
    missing, gaps are regenerated from the transcript.

    Args:
        data: Options dictionary
        validate: Whether to validate before deserializing

    Returns:
        DictationQuestion instance

    Raises:
        ValidationError: If validate=True and data is invalid
        NoGapsFound: If gaps must be regenerated and the transcript has none
        ValueError: If scoring options are not recognized
    """
    data = dict(data)
    if isinstance(data.get("gaps"), str):
        try:
            data["gaps"] = json.loads(data["gaps"])
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid gaps JSON: {e}", path="gaps") from e

    if validate:
        validate_question(data, strict=False)

    if data.get("gaps"):
        gaps = deserialize_gaps(data["gaps"], validate=False)
    else:
        gaps = extract(data["transcript"])

    return DictationQuestion(
        transcript=data["transcript"],
        gaps=tuple(gaps),
        enable_audio=bool(data.get("enableaudio", False)),
        max_plays=data.get("maxplays", 0),
        display_mode=DisplayMode(data.get("displaymode", "standard")),
        scoring=ScoringConfig.from_dict(data.get("scoring") or {}),
    )


def question_to_json(question: DictationQuestion) -> str:
    return json.dumps(serialize_question(question), ensure_ascii=False)


def question_from_json(text: str, *, validate: bool = True) -> DictationQuestion:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid question JSON: {e}") from e
    return deserialize_question(data, validate=validate)
