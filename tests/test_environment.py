"""
Tests for the 2048 game session.

Tests cover session interface, reproducibility, state transitions and the end of a game.
"""

from contextlib import redirect_stdout
from io import StringIO
from unittest import TestCase, main

import numpy as np

from twentyfortyeight.config import GameConfig
from twentyfortyeight.core.gamemove import Direction
from twentyfortyeight.core.terminal import GameStatus
from twentyfortyeight.envs import TwentyFortyEight
from twentyfortyeight.game import GameState


class TestEnvironmentInterface(TestCase):
    """Test TwentyFortyEight class API and state management."""

    def setUp(self):
        """Initialize fresh environment before each test."""
        self.env = TwentyFortyEight(GameConfig(seed=1))

    def test_reset_state_initialization(self):
        """Reset initializes board with exactly 2 tiles and zero score."""
        obs = self.env.reset()

        # ##>: Exactly 2 non-zero tiles after reset.
        self.assertEqual(np.count_nonzero(obs), 2)

        # ##>: Score and reward reset to zero.
        self.assertEqual(self.env.score, 0)
        self.assertEqual(self.env.reward, 0)

        # ##>: Game not finished after reset.
        self.assertFalse(self.env.is_finished)
        self.assertIs(self.env.status, GameStatus.IN_PROGRESS)

    def test_reset_seed_reproducibility(self):
        """Same seed produces identical initial board state."""
        board1 = self.env.reset(seed=42)
        board2 = self.env.reset(seed=42)

        np.testing.assert_array_equal(board1, board2)

    def test_config_seed_reproducibility(self):
        """Two sessions with the same seed play the same game."""
        other = TwentyFortyEight(GameConfig(seed=1))
        np.testing.assert_array_equal(self.env.observation, other.observation)

        for action in ('left', 'down', 'right', 'up'):
            self.env.step(action)
            other.step(action)
        np.testing.assert_array_equal(self.env.observation, other.observation)
        self.assertEqual(self.env.score, other.score)

    def test_step_return_signature(self):
        """Step returns tuple of (observation, reward, done)."""
        obs, reward, done = self.env.step(Direction.LEFT)

        self.assertIsInstance(obs, np.ndarray)
        self.assertEqual(obs.shape, (4, 4))
        self.assertIsInstance(reward, int)
        self.assertIsInstance(done, bool)

    def test_step_merge(self):
        """A merging step reports its score as reward."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [2, 2, 0, 0]
        self.env._state = GameState(board=board, score=0, status=GameStatus.IN_PROGRESS)

        obs, reward, done = self.env.step(self.env.ACTIONS['left'])

        self.assertEqual(obs[0, 0], 4)
        self.assertEqual(reward, 4)
        self.assertEqual(self.env.score, 4)
        self.assertEqual(np.count_nonzero(obs), 2)
        self.assertFalse(done)

    def test_step_invalid_move(self):
        """A step that changes nothing gains nothing and adds no tile."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0, 0] = 2
        self.env._state = GameState(board=board, score=8, status=GameStatus.IN_PROGRESS)

        obs, reward, done = self.env.step('left')

        np.testing.assert_array_equal(obs, board)
        self.assertEqual(reward, 0)
        self.assertEqual(self.env.score, 8)
        self.assertFalse(done)

    def test_actions(self):
        """Actions map direction names to directions."""
        self.assertEqual(set(self.env.ACTIONS), {'left', 'up', 'right', 'down'})
        self.assertIs(self.env.ACTIONS['down'], Direction.DOWN)

    def test_render(self):
        """Render prints the rows, the score and the status."""
        buffer = StringIO()
        with redirect_stdout(buffer):
            self.env.render()

        lines = buffer.getvalue().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertIn('status=in_progress', lines[-1])


class TestGameEnd(TestCase):
    """Test the behaviour of a finished session."""

    def test_win_stops_game(self):
        """Reaching the target finishes the game and later steps are ignored."""
        env = TwentyFortyEight(GameConfig(target_value=8, seed=0))
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [4, 4, 0, 0]
        env._state = GameState(board=board, score=0, status=GameStatus.IN_PROGRESS)

        _, reward, done = env.step('left')
        self.assertTrue(done)
        self.assertEqual(reward, 8)
        self.assertIs(env.status, GameStatus.WON)

        before = env.observation
        obs, reward, done = env.step('right')
        np.testing.assert_array_equal(obs, before)
        self.assertEqual(reward, 0)
        self.assertTrue(done)
        self.assertEqual(env.score, 8)

    def test_reset_after_end(self):
        """Reset starts a fresh game after the end."""
        env = TwentyFortyEight(GameConfig(target_value=8, seed=0))
        env._state = GameState(board=np.full((4, 4), 2, dtype=np.int64), score=40, status=GameStatus.WON)
        env.reset()

        self.assertFalse(env.is_finished)
        self.assertEqual(env.score, 0)

    def test_random_play_terminates(self):
        """Playing legal moves eventually ends the game."""
        env = TwentyFortyEight(GameConfig(target_value=64, seed=3))
        rng = np.random.default_rng(3)

        for _ in range(10_000):
            if env.is_finished:
                break
            env.step(int(rng.integers(4)))

        self.assertTrue(env.is_finished)
        self.assertIn(env.status, (GameStatus.WON, GameStatus.LOST))


if __name__ == '__main__':
    main()
