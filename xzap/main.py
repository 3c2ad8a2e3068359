#!/usr/bin/env python3
"""
XZAP - Terminal Berry Hunt
===========================
Collect every berry on the board while dodging the aliens. Clearing a
board starts a bigger one with more walls and more aliens.

Controls:
    WASD    - Move (W=up, S=down, A=left, D=right)
    Q       - Quit
    any key - Next level (after a level is complete)
"""

import logging
import queue
import random
import sys
from typing import Optional, Tuple

try:
    from blessed import Terminal
except ImportError:
    print("ERROR: 'blessed' library required. Install with: pip install blessed")
    sys.exit(1)

from .config import GameConfig, DEFAULT_CONFIG, new_rng
from .engine import BoardRenderer
from .keyboard import KeyboardProducer, TerminalKeyReader
from .scheduler import Outcome, Scheduler
from .state import GameState, new_game
from .terminal import TerminalModeError, raw_mode

# Keep log records off the game screen unless the host installs a handler
logging.getLogger('xzap').addHandler(logging.NullHandler())
logger = logging.getLogger(__name__)

FAREWELL = 'Thanks for playing XZAP!'


def play(term: Terminal, config: GameConfig = DEFAULT_CONFIG,
         rng: Optional[random.Random] = None) -> Tuple[Outcome, GameState]:
    """Run one game on an already prepared terminal."""
    state = new_game(config, rng)
    renderer = BoardRenderer(term, config)
    events: queue.Queue = queue.Queue()

    KeyboardProducer(TerminalKeyReader(term).read_key, events).start()

    print(term.home + term.clear, end='', flush=True)
    renderer.render(state)

    outcome = Scheduler(state, events, renderer.render).run()
    logger.info('game ended by %s on level %d, score %d',
                outcome.value, state.level, state.score)

    # Park the cursor below the panel for the closing lines
    print(term.move_xy(0, renderer.height) + term.normal, end='', flush=True)
    return outcome, state


def main():
    """Entry point. Takes no arguments."""
    term = Terminal()
    config = DEFAULT_CONFIG

    try:
        with raw_mode(term):
            outcome, state = play(term, config, new_rng(config.seed))
    except TerminalModeError as exc:
        print(f'Failed to set raw mode: {exc}', file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        # Ctrl-C leaves the same way as the quit key
        logger.info('interrupted, treating as quit')
        outcome, state = Outcome.QUIT, None

    if outcome is Outcome.GAME_OVER:
        print(f'Final Score: {state.score}')
    print(FAREWELL)


if __name__ == '__main__':
    main()
