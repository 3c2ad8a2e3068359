"""
Keyboard Input
===============
Key-to-action mapping and the producer thread that turns blocking
keystroke reads into queue events.

The producer only ever puts opaque key strings on the queue. It never
touches game state.
"""

from typing import Callable, Optional
import logging
import queue
import threading

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .components import Direction

logger = logging.getLogger(__name__)


MOVE_KEYS = {
    'w': Direction.UP,
    's': Direction.DOWN,
    'a': Direction.LEFT,
    'd': Direction.RIGHT,
}
QUIT_KEY = 'q'


def _normalize(key: str) -> str:
    # Multi-character keys (escape sequences) never match a binding
    return key.lower() if len(key) == 1 else ''


def key_to_direction(key: str) -> Optional[Direction]:
    """Movement binding for `key`, or None."""
    return MOVE_KEYS.get(_normalize(key))


def is_quit_key(key: str) -> bool:
    return _normalize(key) == QUIT_KEY


class TerminalKeyReader:
    """Blocking single-keystroke reader over a blessed Terminal."""

    def __init__(self, term: Terminal):
        self.term = term

    def read_key(self) -> str:
        key = self.term.inkey()
        if not key:
            raise EOFError('keyboard stream closed')
        return str(key)


class KeyboardProducer(threading.Thread):
    """
    Forwards every keystroke from `read_key` into `events`.

    A failed read ends the thread quietly apart from a log line; the
    game keeps running on ticks alone.
    """

    def __init__(self, read_key: Callable[[], str], events: queue.Queue):
        super().__init__(name='xzap-keyboard', daemon=True)
        self.read_key = read_key
        self.events = events

    def run(self):
        while True:
            try:
                key = self.read_key()
            except (EOFError, OSError, ValueError) as exc:
                logger.warning('keyboard input stopped: %s', exc)
                return
            self.events.put(key)
