"""
Core type definitions for the line-break cost model.

Settings is a frozen dataclass with fail-fast validation in __post_init__.
It is constructed once per paragraph and shared read-only by every cost
function; nothing in the cost model writes to it.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence


class Alignment(str, Enum):
    """Paragraph alignment. Only JUSTIFY uses the justified hyphen penalty."""

    JUSTIFY = "justify"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class Settings:
    """
    Tunable constants for scoring candidate line breaks.

    fitness_classes holds the upper-bound ratio thresholds of each fitness
    tier, strictly ascending. A list is accepted and stored as a tuple.
    alignment accepts an Alignment or its string value.
    """

    min_ratio: float
    max_ratio: float
    demerit_offset: float
    flag_penalty: float
    hyphen_penalty: float
    hyphen_penalty_ragged: float
    fitness_class_demerit: float
    fitness_classes: tuple[float, ...]
    alignment: Alignment = Alignment.JUSTIFY

    def __post_init__(self) -> None:
        # Frozen dataclass: normalise through object.__setattr__.
        object.__setattr__(self, "fitness_classes", _as_thresholds(self.fitness_classes))
        if not isinstance(self.alignment, Alignment):
            try:
                object.__setattr__(self, "alignment", Alignment(self.alignment))
            except ValueError:
                valid = ", ".join(a.value for a in Alignment)
                raise ValueError(
                    f"alignment must be one of {valid}, got {self.alignment!r}"
                ) from None

        if math.isnan(self.min_ratio) or math.isnan(self.max_ratio):
            raise ValueError("min_ratio and max_ratio must be numbers, got NaN")
        if self.min_ratio > self.max_ratio:
            raise ValueError(
                f"min_ratio ({self.min_ratio}) must not exceed max_ratio ({self.max_ratio})"
            )
        if not self.fitness_classes:
            raise ValueError("fitness_classes must contain at least one threshold")
        for lower, upper in zip(self.fitness_classes, self.fitness_classes[1:]):
            if not lower < upper:
                raise ValueError(
                    f"fitness_classes must be strictly ascending, got {list(self.fitness_classes)}"
                )

    @property
    def is_justified(self) -> bool:
        return self.alignment is Alignment.JUSTIFY

    def replace(self, **changes: Any) -> Settings:
        """Return a validated copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


def _as_thresholds(values: Sequence[float]) -> tuple[float, ...]:
    thresholds = tuple(float(v) for v in values)
    if any(math.isnan(v) for v in thresholds):
        raise ValueError(f"fitness_classes must not contain NaN, got {list(thresholds)}")
    return thresholds


@dataclass(frozen=True)
class LineMeasurement:
    """
    Geometry of one candidate line, as supplied by the text measurer.

    penalty is the break's own penalty: -inf marks a forced break, +inf a
    forbidden one.
    """

    ideal_width: float
    actual_width: float
    word_count: int
    shrink: float
    stretch: float
    penalty: float = 0.0
    flag: bool = False
    has_hyphen: bool = False
    skipping_fitness_class: bool = False


@dataclass(frozen=True)
class BreakScore:
    """All derived scores for one candidate break.

    The sentinel infinities stay in the numeric fields; feasible is False
    whenever the candidate must be rejected.
    """

    ratio: float
    badness: float
    demerit: float
    fitness_class: float
    feasible: bool
