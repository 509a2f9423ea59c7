"""
Public entry points of the 2048 engine: start a game and apply a move.

The caller keeps the (board, score, status) triple between calls; nothing here holds state.
"""

import logging
from typing import NamedTuple

from numpy import ndarray
from numpy.random import default_rng

from twentyfortyeight.config import DEFAULT_TARGET, check_score, check_target
from twentyfortyeight.core.board import empty_board
from twentyfortyeight.core.gameboard import RandomSource, resolve, spawn
from twentyfortyeight.core.gamemove import Direction
from twentyfortyeight.core.terminal import GameStatus, status

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class GameState(NamedTuple):
    """
    State a caller keeps between two moves.

    Attributes
    ----------
    board : ndarray
        Read-only game board.
    score : int
        Accumulated score.
    status : GameStatus
        Status derived from the board.
    """

    board: ndarray
    score: int
    status: GameStatus


def new_game(target_value: int = DEFAULT_TARGET, rng: RandomSource | None = None) -> GameState:
    """
    Start a game: an empty board seeded with two tiles.

    Parameters
    ----------
    target_value : int, optional
        Tile value that wins the game (default is 2048).
    rng : RandomSource, optional
        Source of randomness; a fresh ``numpy.random.default_rng()`` when omitted.

    Returns
    -------
    GameState
        The opening board with a zero score.
    """
    target_value = check_target(target_value)
    rng = default_rng() if rng is None else rng

    board = empty_board()
    for _ in range(2):
        board = spawn(board, rng)

    _logger.debug('New game with target %d', target_value)
    return GameState(board=board, score=0, status=status(board, target_value))


def apply_move(
    board: ndarray,
    score: int,
    direction: Direction,
    target_value: int = DEFAULT_TARGET,
    rng: RandomSource | None = None,
) -> GameState:
    """
    Play one move: resolve the direction, then spawn a tile and recompute the status if the board changed.

    Parameters
    ----------
    board : ndarray
        The current game board. It is never modified.
    score : int
        The score accumulated so far.
    direction : Direction
        The requested move; action numbers and names are accepted as well.
    target_value : int, optional
        Tile value that wins the game (default is 2048).
    rng : RandomSource, optional
        Source of randomness; a fresh ``numpy.random.default_rng()`` when omitted. It is not used when the move
        changes nothing.

    Returns
    -------
    GameState
        The new state. A move that changes nothing returns the same board and score.

    Raises
    ------
    InvalidBoard
        If the board breaks the engine contract.
    ValueError
        If the score is not a non-negative integer, or the direction or the target value is invalid.
    """
    score = check_score(score)

    result = resolve(board, direction, target_value)
    if not result.moved:
        return GameState(board=result.board, score=score, status=status(result.board, target_value))

    rng = default_rng() if rng is None else rng
    spawned = spawn(result.board, rng)
    new_status = status(spawned, target_value)

    if new_status is not GameStatus.IN_PROGRESS:
        _logger.debug('Game %s with score %d', new_status.value, score + result.score_delta)
    return GameState(board=spawned, score=score + result.score_delta, status=new_status)
