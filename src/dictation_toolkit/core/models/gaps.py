"""
Module: gaps

Purpose:
    Provides the Gap dataclass - one fill-in position derived from a
    bracketed span in a transcript, together with every answer the
    author accepts for it.

Key Classes:
    - Gap: Immutable gap with ordered alternatives

Dependencies:
    - dataclasses (std)

Used By:
    - extractor.gaps: Produces Gap sequences from transcripts
    - scoring.scorer: Scores responses against gaps
    - core.utils.serialization: Gap payload codec
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class Gap:
    """
    A single gap in a transcript.

    Alternatives keep the casing the author typed; normalization only
    happens at comparison time so that feedback can show the original.

    Attributes:
        index: 0-based position of the gap within the transcript
        alternatives: Accepted answers in authored order. The first one
            is the primary answer used for display and length weighting.

    Invariants:
        - index >= 0
        - alternatives is a non-empty tuple of str (a bare str is
          rejected; use split_alternatives() to parse bracket text)

    Example:
        >>> gap = Gap(0, ("red", "crimson"))
        >>> gap.primary
        'red'
    """

    index: int
    alternatives: Tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate gap on construction."""
        if self.index < 0:
            raise ValueError(f"Gap index cannot be negative: {self.index}")
        if isinstance(self.alternatives, str):
            # Bare strings are split by the codec, never here.
            raise TypeError(
                f"Gap {self.index} alternatives must be a sequence of strings, "
                f"not a bare string: {self.alternatives!r}"
            )
        alternatives = tuple(self.alternatives)
        if not alternatives:
            raise ValueError(f"Gap {self.index} has no alternatives")
        bad = [alt for alt in alternatives if not isinstance(alt, str)]
        if bad:
            raise TypeError(f"Gap {self.index} has non-string alternatives: {bad!r}")
        object.__setattr__(self, "alternatives", alternatives)

    @property
    def primary(self) -> str:
        """First-listed alternative (display answer)."""
        return self.alternatives[0]

    @property
    def has_blank_alternative(self) -> bool:
        """True if any alternative is empty once surrounding whitespace is removed."""
        return any(not alt.strip() for alt in self.alternatives)

    def to_list(self) -> list[str]:
        """Alternatives as a plain list for JSON output."""
        return list(self.alternatives)

    def __repr__(self) -> str:
        return f"Gap({self.index}, {list(self.alternatives)!r})"
