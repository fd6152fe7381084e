"""
Badness and demerit scoring for candidate line breaks.

Formulas:
    badness = 100 × |ratio|³ + 0.5
    demerit = (demerit_offset + badness + penalty)² + flag_penalty

Infeasible lines carry an infinite badness, which propagates into an
infinite demerit. A finite negative penalty is subtracted as a square, so
favoured breaks can end up with a negative demerit.
"""

from __future__ import annotations

import math
from typing import Optional

from .types import Settings

_BADNESS_SCALE: float = 100.0
_BADNESS_FLOOR: float = 0.5


def _square(value: float) -> float:
    # Multiplication overflows to inf; float ** raises OverflowError.
    return value * value


def get_badness(settings: Settings, ratio: Optional[float]) -> float:
    """
    Calculate the badness of a line from its adjustment ratio.

    A missing ratio (None or NaN) or one below min_ratio is infinitely bad.
    Ratios above max_ratio are not rejected here; feasibility is the job of
    is_valid_ratio.
    """
    if ratio is None or math.isnan(ratio) or ratio < settings.min_ratio:
        return math.inf
    magnitude = abs(ratio)
    return _BADNESS_SCALE * magnitude * magnitude * magnitude + _BADNESS_FLOOR


def get_demerit_from_badness(
    settings: Settings,
    badness: float,
    penalty: float,
    flag: bool,
) -> float:
    """
    Calculate the demerit of a line.

    Args:
        settings: Cost constants.
        badness: The line's badness.
        penalty: Penalty of the break. -inf (a forced break) contributes
            nothing; a finite negative penalty is subtracted as a square.
        flag: Whether the flag penalty applies to this break.

    Returns:
        The line demerit. May be negative for favoured breaks.
    """
    flag_penalty = settings.flag_penalty if flag else 0
    if penalty >= 0:
        return _square(settings.demerit_offset + badness + penalty) + flag_penalty
    if penalty == -math.inf:
        return _square(settings.demerit_offset + badness) + flag_penalty
    return _square(settings.demerit_offset + badness) - _square(penalty) + flag_penalty


def hyphen_penalty_for(settings: Settings) -> float:
    """Penalty of a hyphenated break under the configured alignment."""
    if settings.is_justified:
        return settings.hyphen_penalty
    # left, right, center
    return settings.hyphen_penalty_ragged


def get_demerit(
    settings: Settings,
    ratio: Optional[float],
    flag: bool,
    has_hyphen: bool,
    skipping_fitness_class: bool,
) -> float:
    """
    Calculate the demerit of a candidate break from its properties.

    This is the entry point the breakpoint search calls for each candidate.
    """
    badness = get_badness(settings, ratio)
    additional_penalty = 0.0
    if has_hyphen:
        additional_penalty += hyphen_penalty_for(settings)

    demerit = get_demerit_from_badness(settings, badness, additional_penalty, flag)
    if skipping_fitness_class:
        demerit += settings.fitness_class_demerit
    return demerit
