"""
Grid Model
===========
The playfield is a fixed rectangle whose outer ring of cells is the
frame. Only the interior is ever occupied.
"""

import random

from .components import Position
from .config import GameConfig, DEFAULT_CONFIG


def is_inside_interior(pos: Position, config: GameConfig = DEFAULT_CONFIG) -> bool:
    """True when `pos` lies in [1, width-2] x [1, height-2]."""
    return 0 < pos.x < config.width - 1 and 0 < pos.y < config.height - 1


def interior_center(config: GameConfig = DEFAULT_CONFIG) -> Position:
    """Player start cell."""
    return Position(config.width // 2, config.height // 2)


def random_interior_position(rng: random.Random,
                             config: GameConfig = DEFAULT_CONFIG) -> Position:
    """Uniform draw over the interior. Callers get no uniqueness guarantee."""
    return Position(
        rng.randint(1, config.width - 2),
        rng.randint(1, config.height - 2),
    )
