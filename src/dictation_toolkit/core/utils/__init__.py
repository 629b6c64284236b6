"""
Utils Package

Serialization utilities for stored gap and question payloads.
"""

from .serialization import (
    serialize_gaps,
    deserialize_gaps,
    gaps_to_json,
    gaps_from_json,
    serialize_question,
    deserialize_question,
    question_to_json,
    question_from_json,
)

__all__ = [
    "serialize_gaps",
    "deserialize_gaps",
    "gaps_to_json",
    "gaps_from_json",
    "serialize_question",
    "deserialize_question",
    "question_to_json",
    "question_from_json",
]
