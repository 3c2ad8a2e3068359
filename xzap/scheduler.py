"""
Scheduler
==========
Merges the fixed-interval alien tick with the keystroke queue and
applies exactly one trigger per wake-up to the game state.

The loop is the only code that mutates the state. The keyboard thread
only feeds the queue, so no locking is needed.
"""

from enum import Enum
from typing import Callable
import logging
import queue
import time

from .keyboard import is_quit_key, key_to_direction
from .movement import move_adversaries, move_player
from .state import GameState, Phase

logger = logging.getLogger(__name__)


class Outcome(Enum):
    QUIT = 'quit'
    GAME_OVER = 'game_over'


class Scheduler:
    """Single-consumer game loop over one exclusively owned GameState."""

    def __init__(self, state: GameState, events: queue.Queue,
                 render: Callable[[GameState], None],
                 clock: Callable[[], float] = time.monotonic):
        self.state = state
        self.events = events
        self.render = render
        self.clock = clock
        self.tick_seconds = state.config.tick_seconds

    def handle_tick(self) -> None:
        """Timer fired: step the aliens unless paused or finished."""
        if self.state.phase is not Phase.PLAYING:
            return
        move_adversaries(self.state)
        self.render(self.state)

    def handle_key(self, key: str) -> bool:
        """Apply one keystroke. Returns False when the player quits."""
        phase = self.state.phase
        if phase is Phase.OVER:
            return True
        if phase is Phase.WON:
            self.state.advance_level()
            self.render(self.state)
            return True

        if is_quit_key(key):
            logger.info('quit on level %d with score %d',
                        self.state.level, self.state.score)
            return False

        direction = key_to_direction(key)
        if direction is not None:
            move_player(self.state, direction)
        self.render(self.state)
        return True

    def run(self) -> Outcome:
        """Loop until the player quits or is caught."""
        deadline = self.clock() + self.tick_seconds
        while not self.state.over:
            timeout = max(0.0, deadline - self.clock())
            try:
                key = self.events.get(timeout=timeout)
            except queue.Empty:
                now = self.clock()
                deadline += self.tick_seconds
                if deadline <= now:
                    # Fell behind; drop the missed ticks
                    deadline = now + self.tick_seconds
                self.handle_tick()
                continue

            if not self.handle_key(key):
                return Outcome.QUIT

        return Outcome.GAME_OVER
