"""
Result record returned by every engine step.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class StepOutcome:
    """
    What happened during one tick.

    Attributes:
        ate: the snake ate the food this tick
        died: the game is over (either this tick or earlier)
        reason: 'wall', 'self' or 'obstacle' when the tick itself was fatal
    """

    ate: bool = False
    died: bool = False
    reason: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"ate": self.ate, "died": self.died}
        if self.reason is not None:
            data["reason"] = self.reason
        return data
