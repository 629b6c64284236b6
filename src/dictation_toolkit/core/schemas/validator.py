"""
Schema Validation Utilities

Validates stored gap lists and question option payloads before they are
turned into models.

Two levels:
- Basic checks (always): required fields and value shapes, cheap enough
  for every grading request
- Strict checks (`strict=True`): full JSON Schema validation with
  jsonschema, used when importing question data
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}

DISPLAY_MODES = ("standard", "inline")
SCORING_POLICIES = ("exact", "similarity")
WEIGHTINGS = ("uniform", "length-weighted")


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _validate_strict(data: Any, schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message],
        ) from e


def validate_gaps(data: Any, *, strict: bool = False, path: str = "") -> None:
    """
    Validate a stored gap list.

    Entries may be a bare string (older payloads) or a non-empty list of
    strings.

    Args:
        data: Decoded gap list
        strict: If True, also validate against gaps.schema.json
        path: Prefix for error paths when nested in a larger payload

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, list):
        raise ValidationError(
            f"Gaps must be a list, got {type(data).__name__}",
            path=path,
        )

    for i, entry in enumerate(data):
        entry_path = f"{path}.{i}" if path else str(i)
        if isinstance(entry, str):
            continue
        if not isinstance(entry, list) or not entry:
            raise ValidationError(
                f"Gap {i} must be a string or a non-empty list of strings",
                path=entry_path,
            )
        bad = [alt for alt in entry if not isinstance(alt, str)]
        if bad:
            raise ValidationError(
                f"Gap {i} has non-string alternatives: {bad!r}",
                path=entry_path,
                errors=[f"Not a string: {alt!r}" for alt in bad],
            )

    if strict:
        _validate_strict(data, "gaps")


def validate_question(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate question option data.

    Args:
        data: Question options dictionary
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Question data must be a dict, got {type(data).__name__}")

    transcript = data.get("transcript")
    if not isinstance(transcript, str) or not transcript.strip():
        raise ValidationError("Transcript is required.", path="transcript")

    if "gaps" in data:
        validate_gaps(data["gaps"], path="gaps")

    max_plays = data.get("maxplays", 0)
    if not isinstance(max_plays, int) or isinstance(max_plays, bool) or max_plays < 0:
        raise ValidationError(
            f"Invalid maxplays: {max_plays!r} (must be a non-negative integer)",
            path="maxplays",
        )

    display_mode = data.get("displaymode", "standard")
    if display_mode not in DISPLAY_MODES:
        raise ValidationError(
            f"Invalid displaymode: {display_mode!r} (must be one of {DISPLAY_MODES})",
            path="displaymode",
        )

    if "scoring" in data and data["scoring"] is not None:
        _validate_scoring(data["scoring"])

    if strict:
        _validate_strict(data, "question")


def _validate_scoring(scoring: Any) -> None:
    """Validate scoring options nested in question data."""
    if not isinstance(scoring, dict):
        raise ValidationError(
            f"Scoring options must be a dict, got {type(scoring).__name__}",
            path="scoring",
        )

    policy = scoring.get("policy", "similarity")
    if policy not in SCORING_POLICIES:
        raise ValidationError(
            f"Invalid scoring policy: {policy!r} (must be one of {SCORING_POLICIES})",
            path="scoring.policy",
        )

    weighting = scoring.get("weighting", "length-weighted")
    if weighting not in WEIGHTINGS:
        raise ValidationError(
            f"Invalid weighting: {weighting!r} (must be one of {WEIGHTINGS})",
            path="scoring.weighting",
        )

    threshold = scoring.get("correct_threshold", 0.8)
    if (
        not isinstance(threshold, (int, float))
        or isinstance(threshold, bool)
        or not 0 <= threshold <= 1
    ):
        raise ValidationError(
            f"Invalid correct_threshold: {threshold!r} (must be a number in [0, 1])",
            path="scoring.correct_threshold",
        )
