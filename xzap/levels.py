"""
Level Generator
================
Sizes each level from its number and scatters berries, aliens and
walls across the interior.

Positions are drawn independently, so items may share a cell with each
other or with the player's start. That overlap is accepted behavior.
"""

import logging
from typing import TYPE_CHECKING

from .components import Adversary, Direction
from .grid import interior_center, random_interior_position

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


# =============================================================================
# DIFFICULTY CURVE
# =============================================================================

def collectibles_needed_for(level: int) -> int:
    return 5 + level * 2


def adversary_count_for(level: int) -> int:
    return 1 + level // 2


def obstacle_count_for(level: int) -> int:
    return 10 + level * 3


# =============================================================================
# GENERATION
# =============================================================================

def init_level(state: 'GameState') -> None:
    """
    Populate `state` for its current level.

    Resets the player to the center and replaces all three collections.
    Score, level and the won/over flags are left to the caller.
    """
    config = state.config
    rng = state.rng
    level = state.level

    state.player = interior_center(config)
    state.collectibles_needed = collectibles_needed_for(level)

    state.collectibles = [
        random_interior_position(rng, config)
        for _ in range(state.collectibles_needed)
    ]

    state.adversaries = []
    for _ in range(adversary_count_for(level)):
        position = random_interior_position(rng, config)
        state.adversaries.append(Adversary(position, Direction.random(rng)))

    state.obstacles = [
        random_interior_position(rng, config)
        for _ in range(obstacle_count_for(level))
    ]

    logger.info(
        'level %d generated: %d berries, %d aliens, %d walls',
        level, len(state.collectibles), len(state.adversaries), len(state.obstacles)
    )
