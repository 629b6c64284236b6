"""
Module: question

Purpose:
    Question definition and the response helpers the host calls around
    grading (completeness, summaries, play limits).
"""

from .definition import DictationQuestion, DisplayMode

__all__ = [
    "DictationQuestion",
    "DisplayMode",
]
