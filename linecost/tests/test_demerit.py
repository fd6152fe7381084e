"""Tests for badness and demerit scoring."""

import math

import pytest

from linecost.demerit import get_badness, get_demerit, get_demerit_from_badness, hyphen_penalty_for
from linecost.types import Alignment, Settings


@pytest.fixture(scope="module")
def settings():
    return Settings(
        min_ratio=-1.0,
        max_ratio=2.0,
        demerit_offset=1.0,
        flag_penalty=3000.0,
        hyphen_penalty=50.0,
        hyphen_penalty_ragged=500.0,
        fitness_class_demerit=3000.0,
        fitness_classes=(-0.5, 0.5, 1.0, math.inf),
    )


class TestGetBadness:
    def test_zero_ratio(self, settings):
        assert get_badness(settings, 0.0) == 0.5

    def test_known_values(self, settings):
        """100 × |r|³ + 0.5."""
        assert get_badness(settings, 1.0) == pytest.approx(100.5)
        assert get_badness(settings, 0.5) == pytest.approx(13.0)
        assert get_badness(settings, 2.0) == pytest.approx(800.5)

    def test_symmetric_in_sign(self, settings):
        assert get_badness(settings, -0.5) == get_badness(settings, 0.5)

    def test_min_ratio_boundary_is_feasible(self, settings):
        assert get_badness(settings, -1.0) == pytest.approx(100.5)

    def test_below_min_ratio_is_infinite(self, settings):
        assert get_badness(settings, -1.0001) == math.inf
        assert get_badness(settings, -5.0) == math.inf
        assert get_badness(settings, -math.inf) == math.inf

    def test_none_is_infinite(self, settings):
        assert get_badness(settings, None) == math.inf

    def test_nan_is_infinite(self, settings):
        assert get_badness(settings, math.nan) == math.inf

    def test_above_max_ratio_still_finite(self, settings):
        """Badness only rejects shrinking beyond min_ratio."""
        assert get_badness(settings, 3.0) == pytest.approx(2700.5)

    def test_positive_infinity_is_infinite(self, settings):
        assert get_badness(settings, math.inf) == math.inf

    def test_huge_ratio_overflows_to_infinity(self, settings):
        assert get_badness(settings, 1e120) == math.inf

    def test_non_decreasing_in_magnitude(self, settings):
        ratios = [0.0, 0.1, 0.25, 0.5, 0.75, 1.0, 1.5, 2.0, 10.0]
        values = [get_badness(settings, r) for r in ratios]
        assert values == sorted(values)

    def test_at_least_floor_for_feasible_ratios(self, settings):
        for r in (-1.0, -0.3, 0.0, 0.3, 2.0):
            assert get_badness(settings, r) >= 0.5


class TestGetDemeritFromBadness:
    def test_forced_break_excludes_penalty(self, settings):
        """(1 + 10)² = 121."""
        assert get_demerit_from_badness(settings, 10.0, -math.inf, False) == pytest.approx(121.0)

    def test_forced_break_with_flag(self, settings):
        assert get_demerit_from_badness(settings, 10.0, -math.inf, True) == pytest.approx(3121.0)

    def test_favoured_break_subtracts_square(self, settings):
        """(1 + 10)² − 5² + 3000 = 3096."""
        assert get_demerit_from_badness(settings, 10.0, -5.0, True) == pytest.approx(3096.0)

    def test_favoured_break_can_go_negative(self, settings):
        """(1 + 0.5)² − 100² = −9997.75."""
        assert get_demerit_from_badness(settings, 0.5, -100.0, False) == pytest.approx(-9997.75)

    def test_zero_penalty(self, settings):
        assert get_demerit_from_badness(settings, 10.0, 0.0, False) == pytest.approx(121.0)

    def test_positive_penalty_inside_square(self, settings):
        """(1 + 10 + 50)² = 3721."""
        assert get_demerit_from_badness(settings, 10.0, 50.0, False) == pytest.approx(3721.0)

    def test_flag_penalty_added_outside_square(self, settings):
        plain = get_demerit_from_badness(settings, 10.0, 50.0, False)
        flagged = get_demerit_from_badness(settings, 10.0, 50.0, True)
        assert flagged - plain == pytest.approx(3000.0)

    def test_infinite_badness_is_infinite(self, settings):
        assert get_demerit_from_badness(settings, math.inf, 0.0, False) == math.inf
        assert get_demerit_from_badness(settings, math.inf, -math.inf, True) == math.inf

    def test_huge_badness_does_not_raise(self, settings):
        assert get_demerit_from_badness(settings, 1e200, 0.0, False) == math.inf

    def test_forbidden_penalty_is_infinite(self, settings):
        assert get_demerit_from_badness(settings, 10.0, math.inf, False) == math.inf

    def test_uses_demerit_offset(self, settings):
        offset = settings.replace(demerit_offset=10.0)
        assert get_demerit_from_badness(offset, 10.0, 0.0, False) == pytest.approx(400.0)


class TestHyphenPenaltyFor:
    def test_justify_uses_hyphen_penalty(self, settings):
        assert hyphen_penalty_for(settings) == 50.0

    @pytest.mark.parametrize("alignment", [Alignment.LEFT, Alignment.RIGHT, Alignment.CENTER])
    def test_ragged_alignments_use_ragged_penalty(self, settings, alignment):
        assert hyphen_penalty_for(settings.replace(alignment=alignment)) == 500.0


class TestGetDemerit:
    def test_perfect_line(self, settings):
        """Ratio 0 → badness 0.5 → (1 + 0.5)² = 2.25."""
        assert get_demerit(settings, 0.0, False, False, False) == pytest.approx(2.25)

    def test_hyphen_justified(self, settings):
        """(1 + 0.5 + 50)² = 2652.25."""
        assert get_demerit(settings, 0.0, False, True, False) == pytest.approx(2652.25)

    def test_hyphen_ragged(self, settings):
        """(1 + 0.5 + 500)² = 251502.25."""
        left = settings.replace(alignment=Alignment.LEFT)
        assert get_demerit(left, 0.0, False, True, False) == pytest.approx(251502.25)

    def test_ragged_without_hyphen_matches_justified(self, settings):
        center = settings.replace(alignment=Alignment.CENTER)
        assert get_demerit(center, 0.5, False, False, False) == get_demerit(
            settings, 0.5, False, False, False
        )

    def test_skipping_fitness_class_adds_demerit(self, settings):
        assert get_demerit(settings, 0.0, False, False, True) == pytest.approx(3002.25)

    def test_flag_adds_flag_penalty(self, settings):
        assert get_demerit(settings, 0.0, True, False, False) == pytest.approx(3002.25)

    def test_all_penalties_combined(self, settings):
        """(1 + 100.5 + 50)² + 3000 + 3000 = 28952.25."""
        assert get_demerit(settings, 1.0, True, True, True) == pytest.approx(28952.25)

    def test_infeasible_ratio_is_infinite(self, settings):
        assert get_demerit(settings, -2.0, False, False, False) == math.inf
        assert get_demerit(settings, None, False, False, False) == math.inf

    def test_repeated_calls_identical(self, settings):
        first = get_demerit(settings, 0.37, True, True, True)
        for _ in range(5):
            assert get_demerit(settings, 0.37, True, True, True) == first
