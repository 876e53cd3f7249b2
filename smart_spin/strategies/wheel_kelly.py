"""
The Wheel Kelly Engine.

The Fair's spinning wheel pays even money: bet N star tokens, win N or lose N.
Whether that is a good bet depends on two things the game tells us:

1. Base odds - out of 30 possible initial velocities, 22 land on green and 8
   on orange (see WheelSpinGame's constructor).
2. Lucky speedup - each frame the wheel may get nudged onto the chosen side
   with probability luck / 15 (green) or luck / 20 (orange).

Given the win probability, the Kelly criterion for an even-money bet says to
wager 2p - 1 of the bankroll. Below 50% we sit out.

All probability math is done with Fraction so boundary cases are exact.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from numbers import Real
from typing import Optional

from smart_spin.config import WheelConfig

logger = logging.getLogger(__name__)

SCORE_CEILING = 9999

BASE_GREEN_PROBABILITY = Fraction(22, 30)
BASE_ORANGE_PROBABILITY = Fraction(8, 30)


class BetSide(Enum):
    GREEN = "green"
    ORANGE = "orange"

    @classmethod
    def from_flag(cls, is_bet_on_green: bool) -> "BetSide":
        return cls.GREEN if is_bet_on_green else cls.ORANGE

    @property
    def is_green(self) -> bool:
        return self is BetSide.GREEN


def _clamp(value, low, high):
    return max(min(value, high), low)


def compute_win_probability(luck_level: int, is_bet_on_green: bool,
                            config: Optional[WheelConfig] = None) -> Fraction:
    """
    Probability that the wheel stops on the side we bet on.

    win = P(chosen) + P(other) * P(lucky speedup)

    The speedup probability is clamped to [0, 1], so the result is a convex
    combination of P(chosen) and 1 and always lands in [0, 1].
    """
    if config is None:
        green = BASE_GREEN_PROBABILITY
        green_divisor, orange_divisor = 15, 20
    else:
        green = Fraction(config.green_outcomes, config.total_outcomes)
        green_divisor, orange_divisor = config.green_luck_divisor, config.orange_luck_divisor
    orange = 1 - green

    if is_bet_on_green:
        speedup = _clamp(Fraction(luck_level, green_divisor), 0, 1)
        base_win, base_lose = green, orange
    else:
        speedup = _clamp(Fraction(luck_level, orange_divisor), 0, 1)
        base_win, base_lose = orange, green

    return base_win + base_lose * speedup


def compute_optimal_fraction(win_probability: Real) -> Real:
    """
    Kelly criterion: f* = p - q / b

    The wheel pays 1:1 so b = 1 and q = 1 - p, leaving f* = 2p - 1.
    No edge means no bet: anything at or below a coin flip gives 0.
    """
    return _clamp(2 * win_probability - 1, 0, 1)


def compute_max_winnable(score: int, score_ceiling: int = SCORE_CEILING) -> int:
    """Tokens we can still gain before hitting the ceiling. Never negative."""
    return max(score_ceiling - score, 0)


def compute_optimal_wager(luck_level: int, is_bet_on_green: bool, score: int,
                          score_ceiling: int = SCORE_CEILING,
                          config: Optional[WheelConfig] = None) -> int:
    """
    Whole star tokens to wager.

    The Kelly stake is truncated toward zero, then capped by what can still be
    won before the score ceiling.
    """
    fraction = compute_optimal_fraction(
        compute_win_probability(luck_level, is_bet_on_green, config)
    )
    raw_wager = int(fraction * score)
    max_winnable = compute_max_winnable(score, score_ceiling)
    return max(min(raw_wager, max_winnable), 0)


def expected_log_growth(win_probability: Real, fraction: Real) -> float:
    """
    Expected log growth of the bankroll per spin when staking `fraction`.

    g(f) = p * ln(1 + f) + q * ln(1 - f)

    Staking everything on a bet that can lose is ruin: -inf.
    """
    p = float(win_probability)
    f = float(fraction)
    q = 1.0 - p
    growth = p * math.log1p(f) if p > 0 else 0.0
    if q > 0:
        if f >= 1.0:
            return -math.inf
        growth += q * math.log1p(-f)
    return growth


@dataclass
class WagerDecision:
    side: BetSide
    luck_level: int
    score: int
    win_probability: Fraction
    fraction: Real
    raw_wager: int
    max_winnable: int
    wager: int

    @property
    def ceiling_bound(self) -> bool:
        """True when the score ceiling, not Kelly, set the wager."""
        return self.max_winnable < self.raw_wager

    @property
    def growth_rate(self) -> float:
        return expected_log_growth(self.win_probability, self.fraction)

    @property
    def verdict(self) -> str:
        if self.wager == 0:
            return "sit_out" if self.fraction == 0 else "capped_out"
        if self.fraction == 1:
            return "all_in"
        return "kelly"


class WagerCalculator:
    """
    Kelly sizing for the Fair wheel, bound to a WheelConfig.

    Stateless apart from its config, so one instance can serve every menu
    the host opens.
    """

    def __init__(self, config: Optional[WheelConfig] = None):
        self.config = config or WheelConfig()

    def win_probability(self, luck_level: int, is_bet_on_green: bool) -> Fraction:
        return compute_win_probability(luck_level, is_bet_on_green, self.config)

    def optimal_fraction(self, luck_level: int, is_bet_on_green: bool) -> Real:
        return compute_optimal_fraction(self.win_probability(luck_level, is_bet_on_green))

    def optimal_wager(self, luck_level: int, is_bet_on_green: bool, score: int) -> int:
        return compute_optimal_wager(
            luck_level, is_bet_on_green, score,
            score_ceiling=self.config.score_ceiling,
            config=self.config,
        )

    def decide(self, luck_level: int, is_bet_on_green: bool, score: int) -> WagerDecision:
        """Full breakdown of how the wager was reached."""
        win_probability = self.win_probability(luck_level, is_bet_on_green)
        fraction = compute_optimal_fraction(win_probability)
        raw_wager = int(fraction * score)
        max_winnable = compute_max_winnable(score, self.config.score_ceiling)
        wager = max(min(raw_wager, max_winnable), 0)

        logger.debug(
            "luck=%d side=%s score=%d p=%.4f f=%.4f raw=%d cap=%d wager=%d",
            luck_level, BetSide.from_flag(is_bet_on_green).value, score,
            win_probability, fraction, raw_wager, max_winnable, wager,
        )

        return WagerDecision(
            side=BetSide.from_flag(is_bet_on_green),
            luck_level=luck_level,
            score=score,
            win_probability=win_probability,
            fraction=fraction,
            raw_wager=raw_wager,
            max_winnable=max_winnable,
            wager=wager,
        )
