"""Suitability verdict for fishing and drone deployment."""
from attrs import define

from forecast_core.config import CONDITION_GOOD


@define(frozen=True)
class ConditionVerdict:
    """Result of evaluating wind conditions.

    `should_flash` drives the aggressive red alert and `should_warn_drone` the
    orange caution; the decision order guarantees they are never both set.
    """

    condition: str = CONDITION_GOOD
    drone_not_an_option: bool = False
    should_flash: bool = False
    should_warn_drone: bool = False
    drone_warning_reason: str = ""

    @property
    def is_good(self) -> bool:
        return self.condition == CONDITION_GOOD

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "condition": self.condition,
            "drone_not_an_option": self.drone_not_an_option,
            "should_flash": self.should_flash,
            "should_warn_drone": self.should_warn_drone,
            "drone_warning_reason": self.drone_warning_reason,
        }
