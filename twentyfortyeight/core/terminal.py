"""
Terminal state detection for the 2048 engine.
"""

from enum import Enum

from numpy import ndarray

from twentyfortyeight.config import DEFAULT_TARGET, check_target
from twentyfortyeight.core.board import validate_board


class GameStatus(str, Enum):
    """Status of a game, always derived from its board."""

    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


def is_done(board: ndarray) -> bool:
    """
    Check if no move can change the board anymore.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    bool
        True if there is no empty cell and no two adjacent cells hold the same value.
    """
    cells = validate_board(board)
    return bool(
        (cells != 0).all()
        and not (cells[:-1] == cells[1:]).any()
        and not (cells[:, :-1] == cells[:, 1:]).any()
    )


def status(board: ndarray, target_value: int = DEFAULT_TARGET) -> GameStatus:
    """
    Compute the status of a board.

    Parameters
    ----------
    board : ndarray
        The current game board.
    target_value : int, optional
        Tile value that wins the game (default is 2048).

    Returns
    -------
    GameStatus
        WON if a cell holds the target, else LOST if no move is possible, else IN_PROGRESS.

    Notes
    -----
    Winning is checked first: a full, locked board that holds the target is WON.
    """
    cells = validate_board(board)
    target_value = check_target(target_value)

    if (cells == target_value).any():
        return GameStatus.WON
    if is_done(cells):
        return GameStatus.LOST
    return GameStatus.IN_PROGRESS
