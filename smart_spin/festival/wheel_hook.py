"""
Festival Wheel Hook - the seam between the game and the calculator.

The host collects everything we need when a menu opens and passes it in
explicitly. We decide whether the menu is the wheel's wager prompt and, if so,
write the optimal wager into it.

Hooks into:
- Any menu-changed event the host raises
- Any wager input that can report and accept a number and its display text
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from smart_spin.config import SmartSpinConfig
from smart_spin.strategies.wheel_kelly import WagerCalculator

logger = logging.getLogger(__name__)


@runtime_checkable
class WagerInput(Protocol):
    """What a host's number-selection UI has to expose."""

    def get_wager_value(self) -> int: ...

    def set_wager_value(self, value: int) -> None: ...

    def set_wager_display_text(self, text: str) -> None: ...


class NumberSelectionMenu:
    """
    Plain number picker: a numeric value plus the text box showing it.

    Hosts with a real menu object wrap it in something shaped like this.
    """

    def __init__(self, current_value: int = 0, text: Optional[str] = None):
        self.current_value = current_value
        self.text = str(current_value) if text is None else text

    def get_wager_value(self) -> int:
        return self.current_value

    def set_wager_value(self, value: int) -> None:
        self.current_value = value

    def set_wager_display_text(self, text: str) -> None:
        self.text = text


@dataclass
class FestivalState:
    festival_id: Optional[str]
    last_question_key: Optional[str]
    luck_level: int
    is_bet_on_green: bool
    festival_score: int


class WheelBetHook:
    """Pre-fills the wheel wager whenever the wager menu opens at the Fair."""

    def __init__(self, config: Optional[SmartSpinConfig] = None,
                 calculator: Optional[WagerCalculator] = None):
        self.config = config or SmartSpinConfig()
        self.calculator = calculator or WagerCalculator(self.config.wheel)

    def is_wheel_bet(self, state: FestivalState) -> bool:
        return (
            state.festival_id == self.config.festival.festival_id
            and state.last_question_key == self.config.festival.wheel_question_key
        )

    def on_menu_changed(self, state: FestivalState, new_menu: object) -> Optional[int]:
        """
        Handle a menu change. Returns the wager written, or None if the menu
        wasn't the wheel's wager prompt.
        """
        if not self.is_wheel_bet(state):
            return None
        if not isinstance(new_menu, WagerInput):
            return None

        wager = self.calculator.optimal_wager(
            state.luck_level, state.is_bet_on_green, state.festival_score
        )
        self.apply_wager(new_menu, wager)
        logger.debug("Pre-filled wheel wager %d (score %d)", wager, state.festival_score)
        return wager

    @staticmethod
    def apply_wager(menu: WagerInput, wager: int) -> None:
        menu.set_wager_value(wager)
        menu.set_wager_display_text(str(wager))
