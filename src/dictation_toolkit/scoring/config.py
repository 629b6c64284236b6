"""
Module: scoring.config

Purpose:
    Configuration dataclass for gap scoring. Immutable settings with
    validation on construction.

Key Classes:
    - ScoringPolicy: exact vs. similarity per-gap comparison
    - Weighting: how gap scores combine into the aggregate
    - ScoringConfig: Main configuration for the scorer

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - scoring.scorer: Policy and weighting selection
    - scoring.feedback: Correctness threshold
    - question.definition: Per-question scoring options
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class ScoringPolicy(Enum):
    """Per-gap comparison policy."""
    EXACT = "exact"
    SIMILARITY = "similarity"


class Weighting(Enum):
    """Aggregate weighting mode."""
    UNIFORM = "uniform"
    LENGTH_WEIGHTED = "length-weighted"


# Score at which feedback shows a gap as correct
DEFAULT_CORRECT_THRESHOLD = 0.8


@dataclass(frozen=True)
class ScoringConfig:
    """
    Configuration for scoring (immutable).

    Attributes:
        policy: How a single alternative is compared with the input
        weighting: How gap scores are combined into the aggregate
        correct_threshold: Minimum score for a gap to count as correct
            in feedback. Does not affect the grade.

    Invariants:
        - 0.0 <= correct_threshold <= 1.0

    Example:
        >>> config = ScoringConfig.from_dict({"policy": "exact"})
        >>> config.policy
        <ScoringPolicy.EXACT: 'exact'>
    """

    policy: ScoringPolicy = ScoringPolicy.SIMILARITY
    weighting: Weighting = Weighting.LENGTH_WEIGHTED
    correct_threshold: float = DEFAULT_CORRECT_THRESHOLD

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.policy, ScoringPolicy):
            raise ValueError(f"Invalid scoring policy: {self.policy!r}")
        if not isinstance(self.weighting, Weighting):
            raise ValueError(f"Invalid weighting: {self.weighting!r}")
        if not 0.0 <= self.correct_threshold <= 1.0:
            raise ValueError(
                f"correct_threshold must be within [0, 1]: {self.correct_threshold}"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def exact(cls, weighting: Weighting = Weighting.UNIFORM) -> ScoringConfig:
        """Binary correct/incorrect scoring."""
        return cls(policy=ScoringPolicy.EXACT, weighting=weighting)

    @classmethod
    def similarity(cls, weighting: Weighting = Weighting.LENGTH_WEIGHTED) -> ScoringConfig:
        """Partial credit by normalized edit distance."""
        return cls(policy=ScoringPolicy.SIMILARITY, weighting=weighting)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ScoringConfig:
        """
        Build a config from plain option values.

        Args:
            data: Mapping with optional "policy", "weighting" and
                "correct_threshold" keys, using the string values of
                the enums

        Returns:
            ScoringConfig with defaults for missing keys

        Raises:
            ValueError: If a value is not recognized
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Invalid scoring option: expected a mapping, got {data!r}")
        defaults = cls()
        try:
            policy = ScoringPolicy(data.get("policy", defaults.policy.value))
            weighting = Weighting(data.get("weighting", defaults.weighting.value))
            threshold = float(data.get("correct_threshold", defaults.correct_threshold))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid scoring option: {e}") from e
        return cls(policy=policy, weighting=weighting, correct_threshold=threshold)

    def to_dict(self) -> dict[str, Any]:
        return {
            "policy": self.policy.value,
            "weighting": self.weighting.value,
            "correct_threshold": self.correct_threshold,
        }
