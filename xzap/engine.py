"""
Rendering Engine
=================
Double-buffered terminal renderer for the board and status panel.
"""

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING

try:
    from blessed import Terminal
except ImportError:
    raise ImportError("'blessed' library required. Install with: pip install blessed")

from .config import GameConfig
from .components import Position

if TYPE_CHECKING:
    from .state import GameState


# ANSI 256 color constants
NEON_CYAN = 51
NEON_MAGENTA = 201
NEON_YELLOW = 226
NEON_GREEN = 46
NEON_RED = 196

GRAY_MED = 245
GRAY_DARK = 238

WHITE = 255

# Board glyphs
FRAME_HORIZONTAL = '═'
FRAME_VERTICAL = '║'
FRAME_CORNERS = ('╔', '╗', '╚', '╝')
OBSTACLE_CHAR = '█'
COLLECTIBLE_CHAR = '●'
ADVERSARY_CHAR = '☠'
PLAYER_CHAR = '◆'

CONTROLS_TEXT = 'Controls: W=Up, S=Down, A=Left, D=Right, Q=Quit'
GAME_OVER_TEXT = '*** GAME OVER! You were caught by an alien! ***'
LEVEL_COMPLETE_TEXT = '*** LEVEL COMPLETE! Press any key for next level ***'

# Rows reserved under the board for the status panel
PANEL_ROWS = 8


@dataclass
class Cell:
    """One board or panel character and its colour."""
    char: str = ' '
    fg_color: int = 7

    def matches(self, other: 'Cell') -> bool:
        return self.char == other.char and self.fg_color == other.fg_color

    def reset(self):
        self.char = ' '
        self.fg_color = 7


class DoubleBuffer:
    """
    Two fixed-size cell grids sized to the board plus its panel.

    Frames are composed in `back`; `present()` emits cursor moves only
    for cells that differ from what is already on screen in `front`.
    """

    def __init__(self, term: Terminal, width: int, height: int):
        self.term = term
        self.width = width
        self.height = height
        self.front: List[List[Cell]] = self._blank()
        self.back: List[List[Cell]] = self._blank()
        self._normal = term.normal

    def _blank(self) -> List[List[Cell]]:
        return [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    def clear_back(self):
        for row in self.back:
            for cell in row:
                cell.reset()

    def put(self, x: int, y: int, char: str, fg_color: int = 7):
        """Write one cell; anything outside the grid is clipped."""
        if 0 <= x < self.width and 0 <= y < self.height:
            cell = self.back[y][x]
            cell.char = char
            cell.fg_color = fg_color

    def put_string(self, x: int, y: int, text: str, fg_color: int = 7):
        for i, char in enumerate(text):
            self.put(x + i, y, char, fg_color)

    def present(self) -> str:
        """
        Return the escape sequences that turn the last frame into the
        composed one. An unchanged board yields an empty string.
        """
        output_parts = []
        for y, (new_row, old_row) in enumerate(zip(self.back, self.front)):
            for x, cell in enumerate(new_row):
                if cell.matches(old_row[x]):
                    continue
                output_parts.append(self.term.move_xy(x, y))
                output_parts.append(self._normal)
                output_parts.append(self.term.color(cell.fg_color))
                output_parts.append(cell.char)

        # The composed frame is now what the screen shows
        self.front, self.back = self.back, self.front
        return ''.join(output_parts)


def status_lines(state: 'GameState') -> List[str]:
    """Text of the panel drawn under the board."""
    lines = [
        '',
        f'Level: {state.level:<3d}  Score: {state.score:<6d}  '
        f'Berries: {state.collected}/{state.collectibles_needed}',
        '',
        CONTROLS_TEXT,
    ]
    if state.over:
        lines += ['', GAME_OVER_TEXT]
    if state.won:
        lines += ['', LEVEL_COMPLETE_TEXT]
    return lines


@dataclass
class BoardRenderer:
    """Draws the whole game state, one full frame per call."""
    term: Terminal
    config: GameConfig = field(default_factory=GameConfig)
    buffer: DoubleBuffer = field(init=False)

    def __post_init__(self):
        width = max(self.config.width, len(LEVEL_COMPLETE_TEXT))
        self.buffer = DoubleBuffer(self.term, width, self.config.height + PANEL_ROWS)

    @property
    def height(self) -> int:
        return self.buffer.height

    def draw_frame(self, color: int = GRAY_DARK):
        """Draw the border ring around the board."""
        w, h = self.config.width, self.config.height
        for x in range(w):
            self.buffer.put(x, 0, FRAME_HORIZONTAL, color)
            self.buffer.put(x, h - 1, FRAME_HORIZONTAL, color)
        for y in range(h):
            self.buffer.put(0, y, FRAME_VERTICAL, color)
            self.buffer.put(w - 1, y, FRAME_VERTICAL, color)
        top_left, top_right, bottom_left, bottom_right = FRAME_CORNERS
        self.buffer.put(0, 0, top_left, color)
        self.buffer.put(w - 1, 0, top_right, color)
        self.buffer.put(0, h - 1, bottom_left, color)
        self.buffer.put(w - 1, h - 1, bottom_right, color)

    def _put_cell(self, pos: Position, char: str, color: int):
        # Never draw over the frame
        if 0 < pos.x < self.config.width - 1 and 0 < pos.y < self.config.height - 1:
            self.buffer.put(pos.x, pos.y, char, color)

    def draw(self, state: 'GameState') -> str:
        """Compose a frame and return the terminal output for it."""
        self.buffer.clear_back()
        self.draw_frame()

        for wall in state.obstacles:
            self._put_cell(wall, OBSTACLE_CHAR, GRAY_MED)
        for berry in state.collectibles:
            self._put_cell(berry, COLLECTIBLE_CHAR, NEON_MAGENTA)
        for adversary in state.adversaries:
            self._put_cell(adversary.position, ADVERSARY_CHAR, NEON_GREEN)
        self._put_cell(state.player, PLAYER_CHAR, NEON_CYAN)

        panel_y = self.config.height
        for i, line in enumerate(status_lines(state)):
            color = WHITE
            if line == GAME_OVER_TEXT:
                color = NEON_RED
            elif line == LEVEL_COMPLETE_TEXT:
                color = NEON_YELLOW
            elif line == CONTROLS_TEXT:
                color = GRAY_MED
            self.buffer.put_string(0, panel_y + i, line, color)

        return self.buffer.present()

    def render(self, state: 'GameState'):
        """Draw `state` to the terminal."""
        output = self.draw(state)
        if output:
            print(output + self.term.normal, end='', flush=True)
