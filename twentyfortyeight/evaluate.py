# -*- coding: utf-8 -*-
"""
Play games with a simple policy and report the frequency of the largest tile reached.
"""
import logging
from argparse import ArgumentParser
from collections import Counter
from typing import Callable

from numpy import ndarray
from numpy.random import default_rng
from tqdm import trange

from twentyfortyeight.config import DEFAULT_TARGET, check_target
from twentyfortyeight.core.board import max_tile
from twentyfortyeight.core.gameboard import RandomSource, resolve
from twentyfortyeight.core.gamemove import Direction, legal_directions
from twentyfortyeight.core.terminal import GameStatus
from twentyfortyeight.game import apply_move, new_game

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Preference order of the corner policy, keeping big tiles in the bottom-left corner.
CORNER_ORDER = (Direction.DOWN, Direction.LEFT, Direction.RIGHT, Direction.UP)


def random_policy(board: ndarray, rng: RandomSource) -> Direction:
    """Pick a legal direction uniformly."""
    legal = legal_directions(board)
    return legal[int(rng.integers(len(legal)))]


def greedy_policy(board: ndarray, rng: RandomSource) -> Direction:
    """Pick the legal direction with the largest immediate score, the first one on ties."""
    return max(legal_directions(board), key=lambda direction: resolve(board, direction).score_delta)


def corner_policy(board: ndarray, rng: RandomSource) -> Direction:
    """Pick the first legal direction of ``CORNER_ORDER``."""
    legal = legal_directions(board)
    return next(direction for direction in CORNER_ORDER if direction in legal)


POLICIES: dict[str, Callable[[ndarray, RandomSource], Direction]] = {
    "random": random_policy,
    "greedy": greedy_policy,
    "corner": corner_policy,
}


def evaluate(
    policy: str = "random",
    length: int = 10,
    seed: int | None = None,
    target_value: int = DEFAULT_TARGET,
    verbose: bool = True,
) -> dict[int, int]:
    """
    Play several games with a policy.

    Parameters
    ----------
    policy : str, optional
        Name of the policy, one of ``POLICIES`` (default is "random").
    length : int, optional
        The number of games to play (default is 10).
    seed : int, optional
        Seed of the generator shared by the policy and the tile spawner.
    target_value : int, optional
        Tile value that ends a game as won (default is 2048).
    verbose : bool, optional
        Whether to show a progress bar (default is True).

    Returns
    -------
    dict[int, int]
        How many games ended with each largest tile.
    """
    if policy not in POLICIES:
        raise ValueError(f'Unknown policy {policy!r}, expected one of {sorted(POLICIES)}')
    target_value = check_target(target_value)

    choose = POLICIES[policy]
    rng = default_rng(seed)
    score = []

    with trange(length, disable=not verbose) as period:
        for num in period:
            state = new_game(target_value=target_value, rng=rng)

            # ##: Play a game.
            while state.status is GameStatus.IN_PROGRESS:
                direction = choose(state.board, rng)
                state = apply_move(state.board, state.score, direction, target_value=target_value, rng=rng)

                # ##: Log.
                period.set_description(f"Evaluation: {num + 1}")
                period.set_postfix(score=state.score, max=max_tile(state.board))

            _logger.debug(
                'Game %d %s, score=%d, max=%d', num + 1, state.status.value, state.score, max_tile(state.board)
            )

            # ##: Save max cells.
            score.append(max_tile(state.board))

    # ##: Final log.
    frequency = Counter(score)
    return dict(frequency)


def main(argv: list[str] | None = None) -> None:
    parser = ArgumentParser(description="Evaluate a simple 2048 policy")
    parser.add_argument("--policy", type=str, default="random", choices=sorted(POLICIES))
    parser.add_argument("--games", type=int, default=10, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=None, help="Seed of the random generator")
    parser.add_argument("--target", type=int, default=DEFAULT_TARGET, help="Tile value that wins a game")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    result = evaluate(policy=args.policy, length=args.games, seed=args.seed, target_value=args.target)
    print(f"Evaluation of the {args.policy} policy, max tiles: {dict(sorted(result.items()))}")


if __name__ == "__main__":
    main()
