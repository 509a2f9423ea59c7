"""
Flatten a game state into plain Python values and back, for callers that store sessions.
"""

from collections.abc import Mapping

from numpy import asarray

from twentyfortyeight.config import BOARD_SIZE, DEFAULT_TARGET, check_score
from twentyfortyeight.core.board import InvalidBoard, validate_board
from twentyfortyeight.core.terminal import status
from twentyfortyeight.game import GameState


def to_snapshot(state: GameState) -> dict:
    """
    Flatten a game state.

    Parameters
    ----------
    state : GameState
        The state to flatten.

    Returns
    -------
    dict
        ``cells`` (the 16 cell values in row-major order), ``score`` and ``status`` (the status value string).

    Example
    -------
    >>> from numpy.random import default_rng
    >>> from twentyfortyeight.game import new_game
    >>> snapshot = to_snapshot(new_game(rng=default_rng(0)))
    >>> sorted(snapshot)
    ['cells', 'score', 'status']
    """
    return {
        'cells': [int(cell) for cell in asarray(state.board).ravel()],
        'score': int(state.score),
        'status': state.status.value,
    }


def from_snapshot(data: Mapping, target_value: int = DEFAULT_TARGET) -> GameState:
    """
    Rebuild a game state from ``to_snapshot`` output.

    Parameters
    ----------
    data : Mapping
        A mapping with ``cells`` and ``score`` entries. A ``status`` entry is accepted but not trusted.
    target_value : int, optional
        Tile value that wins the game (default is 2048).

    Returns
    -------
    GameState
        The state, with its status recomputed from the board.

    Raises
    ------
    InvalidBoard
        If the cells do not form a valid board.
    ValueError
        If an entry is missing or the score is not a non-negative integer.
    """
    for key in ('cells', 'score'):
        if key not in data:
            raise ValueError(f'Snapshot is missing {key!r}')

    cells = asarray(data['cells'])
    if cells.ndim != 1 or cells.size != BOARD_SIZE * BOARD_SIZE:
        raise InvalidBoard(f'Snapshot must hold {BOARD_SIZE * BOARD_SIZE} cells, got shape {cells.shape}')
    board = validate_board(cells.reshape(BOARD_SIZE, BOARD_SIZE))

    score = check_score(data['score'])

    return GameState(board=board, score=score, status=status(board, target_value))
