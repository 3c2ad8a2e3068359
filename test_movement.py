#!/usr/bin/env python3
"""
Test suite for player and alien movement.
Boards are laid out by hand; no level generation involved.
"""

from collections import Counter
import random
import unittest

from xzap.components import Adversary, Direction, Position
from xzap.config import GameConfig
from xzap.movement import move_adversaries, move_player, retarget
from xzap.state import GameState

CENTER = Position(20, 10)


def make_state(chase_probability=0.3, seed=3, **fields):
    fields.setdefault('player', CENTER)
    fields.setdefault('collectibles', [Position(2, 2)])
    fields.setdefault('collectibles_needed', len(fields['collectibles']))
    config = GameConfig(chase_probability=chase_probability)
    return GameState(config=config, rng=random.Random(seed), **fields)


# =============================================================================
# 1. PLAYER MOVEMENT
# =============================================================================

class TestMovePlayer(unittest.TestCase):

    def test_moves_into_open_cell(self):
        state = make_state()
        self.assertTrue(move_player(state, Direction.UP))
        self.assertEqual(state.player, Position(20, 9))

    def test_each_direction(self):
        expected = {
            Direction.UP: Position(20, 9),
            Direction.DOWN: Position(20, 11),
            Direction.LEFT: Position(19, 10),
            Direction.RIGHT: Position(21, 10),
        }
        for direction, target in expected.items():
            state = make_state()
            move_player(state, direction)
            self.assertEqual(state.player, target, direction)

    def test_frame_blocks(self):
        state = make_state(player=Position(1, 10))
        self.assertFalse(move_player(state, Direction.LEFT))
        self.assertEqual(state.player, Position(1, 10))

    def test_bottom_frame_blocks(self):
        state = make_state(player=Position(5, 18))
        self.assertFalse(move_player(state, Direction.DOWN))
        self.assertEqual(state.player, Position(5, 18))

    def test_obstacle_blocks_without_side_effects(self):
        state = make_state(obstacles=[Position(21, 10)],
                           collectibles=[Position(21, 10), Position(2, 2)])
        self.assertFalse(move_player(state, Direction.RIGHT))
        self.assertEqual(state.player, CENTER)
        self.assertEqual(state.score, 0)
        self.assertEqual(len(state.collectibles), 2)
        self.assertFalse(state.won)

    def test_pickup_scores_ten(self):
        state = make_state(collectibles=[Position(21, 10), Position(2, 2)])
        move_player(state, Direction.RIGHT)
        self.assertEqual(state.score, 10)
        self.assertEqual(state.collectibles, [Position(2, 2)])
        self.assertFalse(state.won)

    def test_pickup_removes_only_one_of_stacked_berries(self):
        east = Position(21, 10)
        state = make_state(collectibles=[east, east, Position(2, 2)])
        move_player(state, Direction.RIGHT)
        self.assertEqual(state.score, 10)
        self.assertEqual(state.collectibles, [east, Position(2, 2)])

    def test_last_berry_wins_level(self):
        state = make_state(collectibles=[Position(21, 10)])
        move_player(state, Direction.RIGHT)
        self.assertEqual(state.score, 10)
        self.assertEqual(state.collectibles, [])
        self.assertTrue(state.won)
        self.assertFalse(state.over)

    def test_walking_onto_alien_is_not_fatal(self):
        state = make_state(adversaries=[Adversary(Position(21, 10), Direction.UP)])
        move_player(state, Direction.RIGHT)
        self.assertEqual(state.player, Position(21, 10))
        self.assertFalse(state.over)


# =============================================================================
# 2. CHASE HEURISTIC
# =============================================================================

class TestRetarget(unittest.TestCase):

    def setUp(self):
        self.adversary = Adversary(Position(5, 5), Direction.UP)

    def test_horizontal_gap_first(self):
        retarget(self.adversary, Position(10, 2))
        self.assertEqual(self.adversary.facing, Direction.RIGHT)
        retarget(self.adversary, Position(2, 9))
        self.assertEqual(self.adversary.facing, Direction.LEFT)

    def test_vertical_when_aligned(self):
        retarget(self.adversary, Position(5, 9))
        self.assertEqual(self.adversary.facing, Direction.DOWN)
        retarget(self.adversary, Position(5, 1))
        self.assertEqual(self.adversary.facing, Direction.UP)

    def test_same_cell_keeps_facing(self):
        self.adversary.facing = Direction.LEFT
        retarget(self.adversary, Position(5, 5))
        self.assertEqual(self.adversary.facing, Direction.LEFT)


# =============================================================================
# 3. ALIEN MOVEMENT
# =============================================================================

class TestMoveAdversaries(unittest.TestCase):

    def test_moves_along_facing(self):
        alien = Adversary(Position(5, 5), Direction.RIGHT)
        state = make_state(chase_probability=0.0, adversaries=[alien])
        move_adversaries(state)
        self.assertEqual(alien.position, Position(6, 5))
        self.assertEqual(alien.facing, Direction.RIGHT)

    def test_always_chasing_turns_toward_player(self):
        alien = Adversary(Position(5, 5), Direction.LEFT)
        state = make_state(chase_probability=1.0, adversaries=[alien])
        move_adversaries(state)
        self.assertEqual(alien.facing, Direction.RIGHT)
        self.assertEqual(alien.position, Position(6, 5))

    def test_blocked_by_obstacle_stays_put(self):
        alien = Adversary(Position(5, 5), Direction.RIGHT)
        state = make_state(chase_probability=0.0, adversaries=[alien],
                           obstacles=[Position(6, 5)])
        move_adversaries(state)
        self.assertEqual(alien.position, Position(5, 5))

    def test_blocked_by_frame_stays_put(self):
        alien = Adversary(Position(1, 1), Direction.UP)
        state = make_state(chase_probability=0.0, adversaries=[alien])
        move_adversaries(state)
        self.assertEqual(alien.position, Position(1, 1))

    def test_blocked_facing_is_rerolled_uniformly(self):
        counts = Counter()
        state = make_state(chase_probability=0.0, seed=11,
                           obstacles=[Position(6, 5)])
        for _ in range(4000):
            alien = Adversary(Position(5, 5), Direction.RIGHT)
            state.adversaries = [alien]
            move_adversaries(state)
            self.assertEqual(alien.position, Position(5, 5))
            counts[alien.facing] += 1
        self.assertEqual(set(counts), set(Direction))
        for direction in Direction:
            self.assertGreater(counts[direction], 800, direction)
            self.assertLess(counts[direction], 1200, direction)

    def test_no_retry_in_same_tick(self):
        alien = Adversary(Position(5, 5), Direction.RIGHT)
        state = make_state(chase_probability=0.0, adversaries=[alien],
                           obstacles=[Position(6, 5)])
        for _ in range(50):
            alien.position = Position(5, 5)
            alien.facing = Direction.RIGHT
            move_adversaries(state)
            self.assertEqual(alien.position, Position(5, 5))

    def test_aliens_may_stack(self):
        first = Adversary(Position(5, 5), Direction.RIGHT)
        second = Adversary(Position(7, 5), Direction.LEFT)
        state = make_state(chase_probability=0.0, adversaries=[first, second])
        move_adversaries(state)
        self.assertEqual(first.position, Position(6, 5))
        self.assertEqual(second.position, Position(6, 5))


# =============================================================================
# 4. CATCHING THE PLAYER
# =============================================================================

class TestCollision(unittest.TestCase):

    def test_step_onto_player_ends_game(self):
        alien = Adversary(Position(19, 10), Direction.RIGHT)
        state = make_state(adversaries=[alien])
        move_adversaries(state)
        self.assertEqual(alien.position, CENTER)
        self.assertTrue(state.over)
        self.assertFalse(state.won)

    def test_blocked_alien_on_player_cell_ends_game(self):
        alien = Adversary(CENTER, Direction.UP)
        state = make_state(chase_probability=0.0, adversaries=[alien],
                           obstacles=[Position(20, 9)])
        move_adversaries(state)
        self.assertEqual(alien.position, CENTER)
        self.assertTrue(state.over)

    def test_remaining_aliens_still_move(self):
        catcher = Adversary(Position(19, 10), Direction.RIGHT)
        wanderer = Adversary(Position(5, 5), Direction.DOWN)
        state = make_state(chase_probability=0.0, adversaries=[catcher, wanderer])
        move_adversaries(state)
        self.assertTrue(state.over)
        self.assertEqual(wanderer.position, Position(5, 6))

    def test_over_is_permanent(self):
        alien = Adversary(Position(19, 10), Direction.RIGHT)
        state = make_state(adversaries=[alien])
        move_adversaries(state)
        for _ in range(20):
            move_adversaries(state)
            self.assertTrue(state.over)

    def test_near_miss_is_harmless(self):
        alien = Adversary(Position(18, 11), Direction.UP)
        state = make_state(chase_probability=0.0, adversaries=[alien])
        move_adversaries(state)
        self.assertEqual(alien.position, Position(18, 10))
        self.assertFalse(state.over)


if __name__ == "__main__":
    unittest.main()
