"""
Tests for the policy evaluation script.
"""

from contextlib import redirect_stdout
from io import StringIO

import numpy as np
import pytest
from numpy.random import default_rng

from twentyfortyeight.core.gamemove import Direction
from twentyfortyeight.evaluate import POLICIES, corner_policy, evaluate, greedy_policy, main, random_policy


class TestPolicies:
    """Tests for the built-in policies."""

    def test_greedy_prefers_merges(self):
        """Greedy picks the first direction with the best immediate score."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0] = [2, 2, 0, 0]
        assert greedy_policy(board, default_rng(0)) is Direction.LEFT

    def test_corner_order(self):
        """Corner picks down first, then left when down is illegal."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0, 1] = 2
        assert corner_policy(board, default_rng(0)) is Direction.DOWN

        board = np.zeros((4, 4), dtype=np.int64)
        board[3, 1] = 2
        assert corner_policy(board, default_rng(0)) is Direction.LEFT

    def test_random_is_legal(self):
        """Random only picks legal directions."""
        board = np.zeros((4, 4), dtype=np.int64)
        board[0, 0] = 2
        rng = default_rng(0)
        for _ in range(20):
            assert random_policy(board, rng) in (Direction.RIGHT, Direction.DOWN)


class TestEvaluate:
    """Tests for evaluate function."""

    @pytest.mark.parametrize('policy', sorted(POLICIES))
    def test_frequency(self, policy):
        """Every game is counted once under its largest tile."""
        result = evaluate(policy=policy, length=3, seed=0, target_value=32, verbose=False)

        assert sum(result.values()) == 3
        for tile in result:
            assert tile >= 4
            assert tile & (tile - 1) == 0
            assert tile <= 32

    def test_seed_reproducibility(self):
        """Same seed gives the same evaluation."""
        first = evaluate(length=2, seed=5, target_value=64, verbose=False)
        second = evaluate(length=2, seed=5, target_value=64, verbose=False)
        assert first == second

    def test_unknown_policy(self):
        """Unknown policies are rejected."""
        with pytest.raises(ValueError):
            evaluate(policy='oracle', length=1, verbose=False)

    def test_main(self):
        """The command line prints the frequency of max tiles."""
        buffer = StringIO()
        with redirect_stdout(buffer):
            main(['--policy', 'corner', '--games', '1', '--seed', '0', '--target', '16'])
        assert 'corner policy' in buffer.getvalue()
