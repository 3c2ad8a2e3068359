"""
Component Definitions
======================
Plain data types shared by the generator, the movement engine and the
renderer. Coordinates are integer cells with y growing downward.
"""

from dataclasses import dataclass
from enum import Enum
import random


class Direction(Enum):
    """Facing of an adversary. Values are unit vectors (dx, dy)."""
    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def random(cls, rng: random.Random) -> 'Direction':
        """Pick one of the four directions uniformly."""
        return rng.choice(list(cls))


@dataclass(frozen=True)
class Position:
    """A board cell."""
    x: int = 0
    y: int = 0

    def step(self, direction: Direction) -> 'Position':
        """The neighbouring cell one step in `direction`."""
        return Position(self.x + direction.dx, self.y + direction.dy)


@dataclass
class Adversary:
    """A wandering alien. Mutated in place every tick."""
    position: Position
    facing: Direction = Direction.UP
