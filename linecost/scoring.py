"""
One-call scoring of a candidate break.

score_candidate runs the full pipeline (ratio → badness → fitness class →
demerit) for a LineMeasurement and tags the result as feasible or not, so a
breakpoint search can work from a single BreakScore instead of comparing
sentinel infinities itself.
"""

from __future__ import annotations

import math
from typing import Optional

from .demerit import get_badness, get_demerit_from_badness, hyphen_penalty_for
from .ratio import get_fitness_class, get_ratio, is_skipping_fitness_class, is_valid_ratio
from .types import BreakScore, LineMeasurement, Settings


def break_penalty(settings: Settings, measurement: LineMeasurement) -> float:
    """
    Combined penalty of a break: its own penalty plus any hyphen penalty.

    A forced break (-inf) stays forced regardless of hyphenation.
    """
    if measurement.penalty == -math.inf:
        return -math.inf
    penalty = measurement.penalty
    if measurement.has_hyphen:
        penalty += hyphen_penalty_for(settings)
    return penalty


def score_candidate(
    settings: Settings,
    measurement: LineMeasurement,
    looseness: float = 0,
    previous_fitness_class: Optional[float] = None,
) -> BreakScore:
    """
    Score a candidate break.

    Args:
        settings: Cost constants.
        measurement: Geometry and break properties of the candidate line.
        looseness: Slack added to max_ratio for the feasibility check.
        previous_fitness_class: Fitness class of the previous chosen line.
            When given, it decides whether the fitness-class demerit applies
            instead of measurement.skipping_fitness_class.

    Returns:
        A BreakScore. feasible is False when the ratio is outside the window
        or the break is forbidden (+inf penalty).

    Raises:
        ValueError: If previous_fitness_class is not a configured class.
    """
    ratio = get_ratio(
        measurement.ideal_width,
        measurement.actual_width,
        measurement.word_count,
        measurement.shrink,
        measurement.stretch,
    )
    badness = get_badness(settings, ratio)
    fitness_class = get_fitness_class(settings, ratio)

    if previous_fitness_class is None:
        skipping = measurement.skipping_fitness_class
    else:
        skipping = is_skipping_fitness_class(settings, previous_fitness_class, fitness_class)

    demerit = get_demerit_from_badness(
        settings, badness, break_penalty(settings, measurement), measurement.flag
    )
    if skipping:
        demerit += settings.fitness_class_demerit

    feasible = measurement.penalty != math.inf and is_valid_ratio(settings, ratio, looseness)
    return BreakScore(
        ratio=ratio,
        badness=badness,
        demerit=demerit,
        fitness_class=fitness_class,
        feasible=feasible,
    )
