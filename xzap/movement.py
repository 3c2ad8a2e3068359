"""
Movement Engine
================
Player steps with wall blocking and berry pickup, and the per-tick
alien step with its chase-or-wander heuristic.

Player/alien contact is only detected on the alien's step. A player
may walk onto an alien's cell and survive until that alien moves.
"""

import logging
from typing import TYPE_CHECKING

from .components import Adversary, Direction, Position
from .grid import is_inside_interior

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


def _is_open(state: 'GameState', pos: Position) -> bool:
    """Inside the interior and not a wall."""
    return is_inside_interior(pos, state.config) and pos not in state.obstacles


# =============================================================================
# PLAYER
# =============================================================================

def move_player(state: 'GameState', direction: Direction) -> bool:
    """
    Step the player one cell. Returns False when the step is blocked,
    in which case the state is untouched.
    """
    target = state.player.step(direction)
    if not _is_open(state, target):
        return False

    state.player = target

    # At most one berry per step, even if several share the cell
    if target in state.collectibles:
        state.collectibles.remove(target)
        state.score += state.config.collectible_reward
        logger.debug('berry picked up at (%d, %d), score %d',
                     target.x, target.y, state.score)

    if not state.collectibles:
        state.won = True
        logger.info('level %d complete, score %d', state.level, state.score)

    return True


# =============================================================================
# ADVERSARIES
# =============================================================================

def retarget(adversary: Adversary, player: Position) -> None:
    """Face the player, closing the horizontal gap before the vertical one."""
    pos = adversary.position
    if player.x > pos.x:
        adversary.facing = Direction.RIGHT
    elif player.x < pos.x:
        adversary.facing = Direction.LEFT
    elif player.y > pos.y:
        adversary.facing = Direction.DOWN
    elif player.y < pos.y:
        adversary.facing = Direction.UP


def move_adversaries(state: 'GameState') -> None:
    """
    Advance every alien one tick.

    A blocked alien stays put and rolls a fresh random facing for the
    next tick. Every alien moves even after one has caught the player.
    """
    rng = state.rng
    for adversary in state.adversaries:
        if rng.random() < state.config.chase_probability:
            retarget(adversary, state.player)

        target = adversary.position.step(adversary.facing)
        if _is_open(state, target):
            adversary.position = target
        else:
            adversary.facing = Direction.random(rng)

        if adversary.position == state.player and not state.over:
            state.over = True
            logger.info('player caught at (%d, %d) on level %d',
                        state.player.x, state.player.y, state.level)
