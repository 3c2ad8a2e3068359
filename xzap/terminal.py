"""
Terminal Mode
==============
Scoped acquisition of the unbuffered, no-echo terminal mode the game
needs for single-key input.
"""

from contextlib import ExitStack, contextmanager
import sys
import termios

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")


class TerminalModeError(Exception):
    """The terminal could not be switched into key-at-a-time mode."""


@contextmanager
def raw_mode(term: Terminal):
    """
    Enter cbreak mode with a hidden cursor for the duration of the block.

    Raises TerminalModeError before yielding if either end is not a
    terminal or the mode change is refused. The original mode is
    restored on every exit path.
    """
    if not sys.stdin.isatty():
        raise TerminalModeError('standard input is not a terminal')
    if not term.is_a_tty:
        raise TerminalModeError('output stream is not a terminal')

    with ExitStack() as stack:
        try:
            stack.enter_context(term.cbreak())
        except termios.error as exc:
            raise TerminalModeError(str(exc)) from exc
        stack.enter_context(term.hidden_cursor())
        yield term
