"""
Game Configuration
===================
Board size, timing and tuning knobs, plus the seeded RNG factory.
"""

from dataclasses import dataclass
from typing import Optional
import random


@dataclass
class GameConfig:
    width: int = 40
    height: int = 20
    tick_seconds: float = 0.3  # adversary step period
    collectible_reward: int = 10
    chase_probability: float = 0.3
    seed: Optional[int] = None


DEFAULT_CONFIG = GameConfig()


def new_rng(seed: Optional[int] = None) -> random.Random:
    """Create the game's random generator. A fixed seed replays a game exactly."""
    rng = random.Random()
    rng.seed(seed)
    return rng
