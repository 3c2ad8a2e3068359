"""
Game State
===========
The single mutable aggregate owned by the scheduler loop, and the
level-to-level transitions.

    PLAYING --last berry--> WON --any key--> PLAYING (level + 1)
    PLAYING --caught-----> OVER (terminal)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional
import logging
import random

from .components import Adversary, Position
from .config import GameConfig, new_rng
from .levels import init_level

logger = logging.getLogger(__name__)


class Phase(Enum):
    PLAYING = 'playing'
    WON = 'won'
    OVER = 'over'


@dataclass
class GameState:
    """Central game state container. Passed to every system."""
    config: GameConfig = field(default_factory=GameConfig)
    rng: random.Random = field(default_factory=random.Random)

    player: Position = Position()
    collectibles: List[Position] = field(default_factory=list)
    adversaries: List[Adversary] = field(default_factory=list)
    obstacles: List[Position] = field(default_factory=list)

    score: int = 0
    level: int = 1
    collectibles_needed: int = 0
    over: bool = False
    won: bool = False

    @property
    def phase(self) -> Phase:
        if self.over:
            return Phase.OVER
        if self.won:
            return Phase.WON
        return Phase.PLAYING

    @property
    def collected(self) -> int:
        """Berries picked up so far on this level."""
        return self.collectibles_needed - len(self.collectibles)

    def advance_level(self) -> bool:
        """Leave the level-complete pause. No-op outside of it."""
        if self.phase is not Phase.WON:
            return False
        self.level += 1
        self.won = False
        init_level(self)
        logger.info('advanced to level %d with score %d', self.level, self.score)
        return True


def new_game(config: Optional[GameConfig] = None,
             rng: Optional[random.Random] = None) -> GameState:
    """Create a level-1 game ready to play."""
    config = config or GameConfig()
    if rng is None:
        rng = new_rng(config.seed)
    state = GameState(config=config, rng=rng)
    init_level(state)
    return state
