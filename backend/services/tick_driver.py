"""
Fixed-step driver that owns an engine and advances it one tick at a time.

The driver is where pacing lives: callers either call tick() directly or
feed elapsed wall-clock time to advance(), which runs as many whole ticks
as fit and carries the remainder over. The engine itself never sees time.
"""

import logging
from typing import Callable, List, Optional

from domain.constants import DEFAULT_TICK_MS
from domain.engine import SnakeEngine
from domain.outcome import StepOutcome
from players.base import Player
from .intent_queue import DirectionQueue, Intent

logger = logging.getLogger(__name__)

StepListener = Callable[[StepOutcome, SnakeEngine], None]


class TickDriver:
    """
    Drives a SnakeEngine at a fixed logical rate.

    Attributes:
        engine: the engine being driven
        player: optional input collaborator asked for a move every tick
        tick_ms: length of one logical tick in milliseconds
        intents: single-slot queue drained into the engine before each step
        running: False once paused, dead or the board is full
    """

    def __init__(
        self,
        engine: SnakeEngine,
        player: Optional[Player] = None,
        tick_ms: float = DEFAULT_TICK_MS,
        on_step: Optional[StepListener] = None,
    ):
        if tick_ms <= 0:
            raise ValueError(f"tick_ms must be positive, got {tick_ms}.")
        self.engine = engine
        self.player = player
        self.tick_ms = tick_ms
        self.intents = DirectionQueue()
        self.listeners: List[StepListener] = []
        if on_step is not None:
            self.listeners.append(on_step)
        self.running = True
        self._accumulated = 0.0

    @property
    def finished(self) -> bool:
        """The round cannot continue without a restart."""
        return self.engine.over or self.engine.won

    def submit(self, intent: Optional[Intent]) -> None:
        """Entry point for input sources (keyboard handlers, tests, ...)."""
        self.intents.push(intent)

    def tick(self) -> StepOutcome:
        """
        Run exactly one logical tick:
          1) Ask the player for a move (if there is one) and queue it
          2) Drain the queue into set_direction()
          3) Step the engine and notify listeners
          4) Stop running on death or a full board
        """
        if self.player is not None and not self.engine.over:
            self.intents.push(self.player.get_move(self.engine.get_current_state()))

        pending = self.intents.pop()
        if pending is not None:
            self.engine.set_direction(pending)

        outcome = self.engine.step()

        if outcome.ate:
            logger.debug("Ate food, score is now %d", self.engine.score)
        if outcome.died:
            self.running = False
            if outcome.reason:
                logger.info("Game over (%s) with score %d", outcome.reason, self.engine.score)
        elif self.engine.won:
            self.running = False
            logger.info("Board cleared with score %d", self.engine.score)

        for listener in self.listeners:
            listener(outcome, self.engine)

        return outcome

    def advance(self, elapsed_ms: float) -> List[StepOutcome]:
        """
        Account for elapsed time and run every whole tick that fits.

        Nothing accumulates while the driver is not running, so resuming
        after a pause does not replay the paused time.
        """
        outcomes: List[StepOutcome] = []
        if not self.running or self.finished:
            return outcomes

        self._accumulated += elapsed_ms
        while self._accumulated >= self.tick_ms and self.running:
            self._accumulated -= self.tick_ms
            outcomes.append(self.tick())

        if not self.running:
            self._accumulated = 0.0
        return outcomes

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        if not self.finished:
            self.running = True

    def toggle_pause(self) -> bool:
        """Flip between paused and running; on a finished round, restart instead."""
        if self.finished:
            self.restart()
        elif self.running:
            self.pause()
        else:
            self.resume()
        return self.running

    def restart(self) -> None:
        self.engine.reset()
        self.intents.clear()
        self._accumulated = 0.0
        if self.player is not None:
            self.player.reset()
        self.running = True
        logger.debug("Round restarted")
