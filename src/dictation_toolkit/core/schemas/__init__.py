"""
Schemas Package

JSON schema definitions and validation utilities.
"""

from .validator import (
    validate_gaps,
    validate_question,
    ValidationError,
)

__all__ = [
    "validate_gaps",
    "validate_question",
    "ValidationError",
]
