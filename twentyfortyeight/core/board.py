"""
Board primitives for the 2048 engine: contract validation, empty cells and read-only copies.

Every function here returns a new array. Boards handed back to callers are flagged read-only so that a
"before" board can never be altered through an "after" one.
"""

from numpy import argwhere, asarray, int64, ndarray, zeros

from twentyfortyeight.config import BOARD_SIZE


class InvalidBoard(ValueError):
    """The board is not a 4x4 grid of zeros and powers of two."""


def freeze(board: ndarray) -> ndarray:
    """Mark an array read-only and return it."""
    board.setflags(write=False)
    return board


def empty_board() -> ndarray:
    """Create a board without any tile."""
    return freeze(zeros((BOARD_SIZE, BOARD_SIZE), dtype=int64))


def validate_board(board) -> ndarray:
    """
    Check a board against the engine contract and return a private copy of it.

    Parameters
    ----------
    board : array_like
        Candidate board, a nested sequence or an array.

    Returns
    -------
    ndarray
        A read-only ``int64`` copy of the board.

    Raises
    ------
    InvalidBoard
        If the board is ragged, not 4x4, not integer-valued, or holds a negative or non-power-of-two value.
    """
    try:
        cells = asarray(board)
    except (TypeError, ValueError) as error:
        raise InvalidBoard(f'Board cannot be read as a grid: {error}') from error

    if cells.shape != (BOARD_SIZE, BOARD_SIZE):
        raise InvalidBoard(f'Board must be {BOARD_SIZE}x{BOARD_SIZE}, got shape {cells.shape}')
    if cells.dtype.kind not in 'iu':
        raise InvalidBoard(f'Board cells must be integers, got dtype {cells.dtype}')

    cells = cells.astype(int64)
    if (cells < 0).any():
        raise InvalidBoard(f'Board cells must be non-negative, got {int(cells.min())}')

    # ##>: A power of two shares no bit with its predecessor.
    tiles = cells[cells != 0]
    invalid = tiles[(tiles < 2) | ((tiles & (tiles - 1)) != 0)]
    if invalid.size:
        raise InvalidBoard(f'Board cells must be 0 or a power of two >= 2, got {int(invalid[0])}')
    return freeze(cells)


def empty_cells(board: ndarray) -> list[tuple[int, int]]:
    """
    List the empty cells of a board in row-major order.

    Parameters
    ----------
    board : ndarray
        The game board.

    Returns
    -------
    list[tuple[int, int]]
        Positions (row, column) holding zero.
    """
    return [(int(row), int(column)) for row, column in argwhere(validate_board(board) == 0)]


def max_tile(board: ndarray) -> int:
    """
    Return the largest tile on the board (0 for an empty board).

    Raises
    ------
    InvalidBoard
        If the board breaks the engine contract.
    """
    return int(validate_board(board).max())
