"""
Single-slot channel between input collaborators and the engine.

Input sources push direction intents whenever they like; the tick driver
drains the slot once per tick and hands the value to
SnakeEngine.set_direction(). Pushing twice before a drain keeps only the
latest intent.
"""

from typing import Optional, Tuple, Union

from domain.constants import coerce_direction
from domain.position import Position

Intent = Union[str, Tuple[int, int]]


class DirectionQueue:
    """Holds at most one pending direction."""

    def __init__(self):
        self._pending: Optional[Position] = None

    def push(self, intent: Optional[Intent]) -> None:
        """
        Store an intent, replacing any pending one. None is ignored so a
        player that wants to keep course does not erase an earlier intent.

        Raises:
            ValueError: If the intent is not a direction name or unit vector.
        """
        if intent is None:
            return
        self._pending = coerce_direction(intent)

    def pop(self) -> Optional[Position]:
        """Return the pending intent and empty the slot."""
        pending, self._pending = self._pending, None
        return pending

    def peek(self) -> Optional[Position]:
        return self._pending

    def clear(self) -> None:
        self._pending = None

    def __bool__(self) -> bool:
        return self._pending is not None
