"""
Module: scoring.distance

Purpose:
    String distance helpers for similarity scoring.

Key Functions:
    - normalize(): Case-fold and trim text before comparison
    - levenshtein_distance(): Unit-cost edit distance
    - similarity(): 1 - distance / longer length, in [0, 1]

Dependencies:
    - none

Used By:
    - scoring.scorer

Note:
    Lengths are counted in Unicode code points, so "café" has length 4
    regardless of its UTF-8 byte size.
"""

from __future__ import annotations


def normalize(text: str) -> str:
    """Lower-case and strip surrounding whitespace."""
    return (text or "").strip().lower()


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning s1 into s2.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(expected: str, actual: str) -> float:
    """
    Normalized similarity of two already-normalized strings.

    Empty strings are handled by the caller; two empty strings return 1.0
    here as well.
    """
    if expected == actual:
        return 1.0
    max_len = max(len(expected), len(actual))
    distance = levenshtein_distance(expected, actual)
    return max(0.0, 1.0 - distance / max_len)
