"""
Line-break cost model for optimal (Knuth–Plass style) paragraph breaking.

Turns the geometry of a candidate line (ideal and actual width, word count,
space stretch and shrink) into an adjustment ratio, a badness, a demerit and
a fitness class, plus the feasibility check a breakpoint search uses to
reject candidates. Every scoring function is pure and takes an explicit,
immutable Settings.
"""

from .config import get_default_settings, load_settings, settings_from_mapping
from .demerit import get_badness, get_demerit, get_demerit_from_badness, hyphen_penalty_for
from .instrumentation import DebugLog, setup_logger
from .ratio import (
    fitness_tier,
    get_fitness_class,
    get_ratio,
    is_skipping_fitness_class,
    is_valid_ratio,
    ratio_is_higher_than_min,
    ratio_is_less_than_max,
)
from .scoring import break_penalty, score_candidate
from .types import Alignment, BreakScore, LineMeasurement, Settings

__all__ = [
    # types
    "Alignment",
    "BreakScore",
    "LineMeasurement",
    "Settings",
    # config
    "get_default_settings",
    "load_settings",
    "settings_from_mapping",
    # ratio
    "get_ratio",
    "is_valid_ratio",
    "ratio_is_less_than_max",
    "ratio_is_higher_than_min",
    "get_fitness_class",
    "fitness_tier",
    "is_skipping_fitness_class",
    # demerit
    "get_badness",
    "get_demerit_from_badness",
    "get_demerit",
    "hyphen_penalty_for",
    # scoring
    "break_penalty",
    "score_candidate",
    # instrumentation
    "DebugLog",
    "setup_logger",
]
