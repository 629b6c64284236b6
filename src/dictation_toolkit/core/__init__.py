"""
Dictation Toolkit Core Package

Shared data models, payload schemas and serialization.

Only the models are re-exported here; import schemas and utils from
their subpackages.
"""

from .models import Gap, GapScore, GradeResult

__all__ = [
    "Gap",
    "GapScore",
    "GradeResult",
]
