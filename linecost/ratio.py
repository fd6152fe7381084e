"""
Adjustment ratio, feasibility window and fitness classes.

The adjustment ratio is positive when a line's spaces must stretch to reach
the ideal width and negative when they must shrink. A ratio outside
[min_ratio, max_ratio + looseness] marks an infeasible break; nothing here
raises for numeric input.

All functions are pure — no side effects, no state.
"""

from __future__ import annotations

import math

from .types import Settings


def get_ratio(
    ideal_width: float,
    actual_width: float,
    word_count: int,
    shrink: float,
    stretch: float,
) -> float:
    """
    Calculate the adjustment ratio of a line.

    Args:
        ideal_width: The width the line should fill.
        actual_width: The natural width of the line's content.
        word_count: Number of words on the line; word_count - 1 spaces adjust.
        shrink: Shrinkability of a single word space.
        stretch: Stretchability of a single word space.

    Returns:
        The adjustment ratio. A line with no adjustable space (fewer than two words,
        or zero stretch/shrink) yields +inf when it is short, -inf when it is
        overfull and 0.0 when it fits exactly.
    """
    difference = ideal_width - actual_width
    if word_count < 2:
        capacity = 0.0
    elif actual_width < ideal_width:
        capacity = (word_count - 1) * stretch
    else:
        capacity = (word_count - 1) * shrink

    if capacity == 0:
        if difference == 0:
            return 0.0
        return math.copysign(math.inf, difference)
    return difference / capacity


def ratio_is_less_than_max(settings: Settings, ratio: float, looseness: float = 0) -> bool:
    """True if ratio does not exceed max_ratio widened by looseness."""
    return ratio <= settings.max_ratio + looseness


def ratio_is_higher_than_min(settings: Settings, ratio: float) -> bool:
    """True if ratio is at or above min_ratio (the line is not overfull)."""
    return ratio >= settings.min_ratio


def is_valid_ratio(settings: Settings, ratio: float, looseness: float = 0) -> bool:
    """
    Check if the adjustment ratio is within the feasible window.

    looseness widens the upper bound only; it is how the breakpoint search
    relaxes its constraints when retrying a paragraph.
    """
    return ratio_is_less_than_max(settings, ratio, looseness) and ratio_is_higher_than_min(
        settings, ratio
    )


def get_fitness_class(settings: Settings, ratio: float) -> float:
    """
    Return the fitness class for an adjustment ratio.

    The class is the first threshold strictly greater than ratio. Ratios at
    or beyond the last threshold (including +inf) fall in the last class.
    """
    for fitness_class in settings.fitness_classes:
        if ratio < fitness_class:
            return fitness_class
    return settings.fitness_classes[-1]


def fitness_tier(settings: Settings, fitness_class: float) -> int:
    """
    Position of a fitness class among the configured thresholds.

    Raises:
        ValueError: If fitness_class is not one of settings.fitness_classes.
    """
    try:
        return settings.fitness_classes.index(fitness_class)
    except ValueError:
        raise ValueError(
            f"{fitness_class!r} is not a configured fitness class "
            f"{list(settings.fitness_classes)}"
        ) from None


def is_skipping_fitness_class(settings: Settings, previous: float, current: float) -> bool:
    """True if two adjacent lines are more than one fitness tier apart."""
    return abs(fitness_tier(settings, current) - fitness_tier(settings, previous)) > 1
