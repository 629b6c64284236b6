"""
Core Models Package

Immutable value types shared by the extractor, scorer and question
definition.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. No accidental mutation between extraction and grading
2. Safe to share between concurrent grading requests
3. Can be used as dict keys or in sets
"""

from .gaps import Gap
from .scoring import GapScore, GradeResult

__all__ = [
    "Gap",
    "GapScore",
    "GradeResult",
]
