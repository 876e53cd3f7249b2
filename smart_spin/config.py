"""
Configuration for SmartSpin.

The wheel odds come from the game itself. Override them only if the game does.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

load_dotenv()


@dataclass
class WheelConfig:
    score_ceiling: int = int(os.getenv("SCORE_CEILING", "9999"))
    green_outcomes: int = int(os.getenv("GREEN_OUTCOMES", "22"))  # of 30 initial velocities
    total_outcomes: int = int(os.getenv("TOTAL_OUTCOMES", "30"))
    green_luck_divisor: int = int(os.getenv("GREEN_LUCK_DIVISOR", "15"))
    orange_luck_divisor: int = int(os.getenv("ORANGE_LUCK_DIVISOR", "20"))

    @property
    def orange_outcomes(self) -> int:
        return self.total_outcomes - self.green_outcomes


@dataclass
class FestivalConfig:
    festival_id: str = os.getenv("FESTIVAL_ID", "fall16")
    wheel_question_key: str = os.getenv("WHEEL_QUESTION_KEY", "wheelBet")


@dataclass
class SmartSpinConfig:
    wheel: WheelConfig = field(default_factory=WheelConfig)
    festival: FestivalConfig = field(default_factory=FestivalConfig)
