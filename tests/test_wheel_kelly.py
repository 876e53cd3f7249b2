"""Tests for the wheel win-probability model and Kelly wager sizing."""

import math
from fractions import Fraction

import pytest

from smart_spin.config import WheelConfig
from smart_spin.strategies.wheel_kelly import (
    BetSide,
    WagerCalculator,
    compute_max_winnable,
    compute_optimal_fraction,
    compute_optimal_wager,
    compute_win_probability,
    expected_log_growth,
)


def default_wheel() -> WheelConfig:
    return WheelConfig(
        score_ceiling=9999,
        green_outcomes=22,
        total_outcomes=30,
        green_luck_divisor=15,
        orange_luck_divisor=20,
    )


@pytest.mark.parametrize("is_green", [True, False])
def test_win_probability_stays_in_unit_interval(is_green):
    for luck in range(-20, 21):
        p = compute_win_probability(luck, is_green)
        assert 0 <= p <= 1


def test_base_probabilities_without_luck():
    assert compute_win_probability(0, True) == Fraction(11, 15)
    assert compute_win_probability(0, False) == Fraction(4, 15)


def test_negative_luck_does_not_lower_odds():
    assert compute_win_probability(-4, True) == Fraction(11, 15)
    assert compute_win_probability(-4, False) == Fraction(4, 15)


def test_lucky_speedup_scales_with_side_divisor():
    # green: 11/15 + 4/15 * 3/15
    assert compute_win_probability(3, True) == Fraction(11, 15) + Fraction(4, 15) * Fraction(3, 15)
    # orange: 4/15 + 11/15 * 10/20
    assert compute_win_probability(10, False) == Fraction(4, 15) + Fraction(11, 15) * Fraction(1, 2)


def test_max_luck_guarantees_a_win():
    assert compute_win_probability(15, True) == 1
    assert compute_win_probability(20, False) == 1
    assert compute_win_probability(99, False) == 1


def test_optimal_fraction_edges():
    assert compute_optimal_fraction(0.5) == 0
    assert compute_optimal_fraction(1.0) == 1
    assert compute_optimal_fraction(Fraction(3, 4)) == Fraction(1, 2)


@pytest.mark.parametrize("p", [0.0, 0.1, 0.25, 0.4999, 0.5])
def test_no_edge_means_no_bet(p):
    assert compute_optimal_fraction(p) == 0


def test_scenario_no_luck_green():
    assert compute_optimal_wager(0, True, 1000, 9999) == 466


def test_scenario_no_luck_orange_sits_out():
    assert compute_optimal_wager(0, False, 1000) == 0


def test_scenario_guaranteed_win_goes_all_in():
    assert compute_optimal_wager(15, True, 500) == 500


def test_scenario_ceiling_binds():
    assert compute_optimal_wager(15, True, 9990, 9999) == 9


def test_wager_is_truncated_not_rounded():
    # 7/15 * 1000 = 466.67
    assert compute_optimal_wager(0, True, 1000) != 467


def test_wager_bounds_over_score_range():
    ceiling = 9999
    for luck in range(-5, 21):
        for is_green in (True, False):
            for score in range(0, ceiling + 1, 37):
                wager = compute_optimal_wager(luck, is_green, score, ceiling)
                assert 0 <= wager <= score
                assert wager <= ceiling - score


def test_score_above_ceiling_never_goes_negative():
    assert compute_max_winnable(10500, 9999) == 0
    assert compute_optimal_wager(15, True, 10500, 9999) == 0


def test_negative_score_gives_zero():
    assert compute_optimal_wager(15, True, -50) == 0


def test_expected_log_growth():
    assert expected_log_growth(Fraction(11, 15), 0) == 0
    kelly = expected_log_growth(Fraction(11, 15), Fraction(7, 15))
    assert kelly > expected_log_growth(Fraction(11, 15), 0.3)
    assert kelly > expected_log_growth(Fraction(11, 15), 0.6)
    assert expected_log_growth(1, 1) == pytest.approx(math.log(2))
    assert expected_log_growth(0.9, 1) == -math.inf


class TestWagerCalculator:
    def test_matches_module_functions(self):
        calculator = WagerCalculator(default_wheel())
        for luck in (-3, 0, 4, 15):
            for is_green in (True, False):
                assert calculator.win_probability(luck, is_green) == compute_win_probability(luck, is_green)
                assert calculator.optimal_wager(luck, is_green, 2500) == compute_optimal_wager(luck, is_green, 2500)

    def test_uses_configured_ceiling(self):
        config = default_wheel()
        config.score_ceiling = 1200
        calculator = WagerCalculator(config)
        assert calculator.optimal_wager(15, True, 1000) == 200

    def test_decide_breakdown(self):
        decision = WagerCalculator(default_wheel()).decide(15, True, 9990)
        assert decision.side is BetSide.GREEN
        assert decision.win_probability == 1
        assert decision.fraction == 1
        assert decision.raw_wager == 9990
        assert decision.max_winnable == 9
        assert decision.wager == 9
        assert decision.ceiling_bound
        assert decision.verdict == "all_in"

    def test_decide_sits_out_without_edge(self):
        decision = WagerCalculator(default_wheel()).decide(0, False, 1000)
        assert decision.side is BetSide.ORANGE
        assert decision.wager == 0
        assert decision.verdict == "sit_out"
        assert not decision.ceiling_bound

    def test_decide_kelly_stake(self):
        decision = WagerCalculator(default_wheel()).decide(0, True, 1000)
        assert decision.fraction == Fraction(7, 15)
        assert decision.wager == 466
        assert decision.verdict == "kelly"
        assert decision.growth_rate > 0


def test_bet_side_from_flag():
    assert BetSide.from_flag(True) is BetSide.GREEN
    assert BetSide.from_flag(False) is BetSide.ORANGE
    assert not BetSide.ORANGE.is_green
