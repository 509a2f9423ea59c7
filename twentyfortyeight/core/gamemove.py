"""
Move directions of the 2048 engine, their mapping to the canonical "slide left" frame, and legal move detection.
"""

from enum import IntEnum
from numbers import Integral
from typing import Callable

from numpy import fliplr, ndarray, rot90

from twentyfortyeight.core.board import validate_board


class Direction(IntEnum):
    """
    Slide direction.

    The integer values follow the action numbering of the environment (0: left, 1: up, 2: right, 3: down).
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value) -> 'Direction':
        """
        Convert a direction, an action number or a direction name into a ``Direction``.

        Parameters
        ----------
        value : Direction, int or str
            The value to convert. Names are case-insensitive; booleans and floats are rejected.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value does not name one of the four directions.
        """
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f'Unknown direction name: {value!r}') from None
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise ValueError(f'Unknown direction: {value!r}')
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f'Unknown direction: {value!r}') from None


def _identity(board: ndarray) -> ndarray:
    return board


# ##>: Direction -> (into canonical frame, back to original frame).
_TRANSFORMS: dict[Direction, tuple[Callable[[ndarray], ndarray], Callable[[ndarray], ndarray]]] = {
    Direction.LEFT: (_identity, _identity),
    Direction.UP: (lambda board: rot90(board, k=1), lambda board: rot90(board, k=-1)),
    Direction.RIGHT: (fliplr, fliplr),
    Direction.DOWN: (lambda board: rot90(board, k=-1), lambda board: rot90(board, k=1)),
}


def to_canonical(board: ndarray, direction: Direction) -> ndarray:
    """
    Orient the board so that sliding in ``direction`` becomes sliding left.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction
        The requested slide direction.

    Returns
    -------
    ndarray
        A view of the board in the canonical frame.
    """
    forward, _ = _TRANSFORMS[direction]
    return forward(board)


def from_canonical(board: ndarray, direction: Direction) -> ndarray:
    """Undo ``to_canonical`` for the same direction."""
    _, inverse = _TRANSFORMS[direction]
    return inverse(board)


def _can_shift(ahead: ndarray, behind: ndarray) -> bool:
    """Whether some tile in ``behind`` can slide into, or merge with, its neighbour in ``ahead``."""
    slides = (ahead == 0) & (behind != 0)
    merges = (ahead != 0) & (ahead == behind)
    return bool((slides | merges).any())


def legal_directions_mask(board: ndarray) -> tuple[bool, bool, bool, bool]:
    """
    Tell, for each direction, whether moving that way would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the board.

    Notes
    -----
    A move is possible when an empty cell lies ahead of a tile in the direction of motion, or when two
    adjacent tiles along the motion axis hold the same value. Nothing is resolved to compute the mask.
    """
    cells = validate_board(board)

    # ##>: Neighbour pairs per axis; which side is ahead depends on the direction of motion.
    west, east = cells[:, :-1], cells[:, 1:]
    north, south = cells[:-1, :], cells[1:, :]

    return (
        _can_shift(ahead=west, behind=east),
        _can_shift(ahead=north, behind=south),
        _can_shift(ahead=east, behind=west),
        _can_shift(ahead=south, behind=north),
    )


def legal_directions(board: ndarray) -> list[Direction]:
    """
    Determine the directions that would change the board.

    Parameters
    ----------
    board : ndarray
        The current game board.

    Returns
    -------
    list[Direction]
        Legal directions in action order (left, up, right, down).
    """
    mask = legal_directions_mask(board)
    return [direction for direction in Direction if mask[direction]]
