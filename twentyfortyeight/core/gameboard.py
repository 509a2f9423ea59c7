"""
Move resolution and tile spawning for the 2048 engine.

All four directions share one row routine: the board is turned so that the move becomes a slide to the left,
every row is compacted and merged, then the board is turned back.
"""

from typing import NamedTuple, Protocol

from numpy import array, array_equal, ndarray, zeros_like

from twentyfortyeight.config import DEFAULT_TARGET, TILE_SPAWN_PROBS, check_target
from twentyfortyeight.core.board import empty_cells, freeze, validate_board
from twentyfortyeight.core.gamemove import Direction, from_canonical, to_canonical


class RandomSource(Protocol):
    """
    Randomness needed by the spawner.

    ``numpy.random.Generator`` satisfies it; tests may pass any object with the same two methods.
    """

    def integers(self, low: int) -> int:
        """Draw an integer in ``[0, low)``."""

    def random(self) -> float:
        """Draw a float in ``[0, 1)``."""


class MoveResult(NamedTuple):
    """
    Outcome of resolving one direction on a board.

    Attributes
    ----------
    board : ndarray
        Read-only board after sliding and merging, before any spawn.
    score_delta : int
        Sum of the tiles created by merges.
    moved : bool
        Whether any cell changed.
    reached_target : bool
        Whether a cell now holds the target value.
    """

    board: ndarray
    score_delta: int
    moved: bool
    reached_target: bool


def merge_row(row: ndarray) -> tuple[int, ndarray]:
    """
    Slide a row to the left, merging adjacent equal tiles once.

    Parameters
    ----------
    row : ndarray
        A 1D array representing one row of the game board.

    Returns
    -------
    score : int
        The total value of the tiles created by merging.
    merged_row : ndarray
        The row after compaction and merging, right-padded with zeros.

    Notes
    -----
    - Zeros (empty cells) are removed before merging.
    - Merging occurs from the start of the row towards the end.
    - A tile created by a merge never merges again in the same call: ``[2, 2, 2, 2]`` gives ``[4, 4, 0, 0]``.
    """
    tiles = row[row != 0]
    merged = []
    score = 0

    index = 0
    while index < len(tiles):
        if index + 1 < len(tiles) and tiles[index] == tiles[index + 1]:
            value = int(tiles[index]) * 2
            merged.append(value)
            score += value
            index += 2
        else:
            merged.append(int(tiles[index]))
            index += 1

    result = zeros_like(row)
    result[: len(merged)] = merged
    return score, result


def slide_and_merge(board: ndarray) -> tuple[int, ndarray]:
    """
    Slide the game board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board in the canonical frame.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.
    """
    result = zeros_like(board)
    score = 0

    for index, row in enumerate(board):
        row_score, result[index] = merge_row(row)
        score += row_score

    return score, result


def resolve(board: ndarray, direction: Direction, target_value: int = DEFAULT_TARGET) -> MoveResult:
    """
    Slide and merge the board in a direction, without adding a new tile.

    Parameters
    ----------
    board : ndarray
        The current game board. It is never modified.
    direction : Direction
        The requested move; action numbers and names are accepted as well.
    target_value : int, optional
        Tile value that wins the game (default is 2048).

    Returns
    -------
    MoveResult
        The new board, the score gained, whether the board changed and whether the target was reached.

    Raises
    ------
    InvalidBoard
        If the board breaks the engine contract.
    ValueError
        If the direction or the target value is invalid.

    Notes
    -----
    A move that changes nothing is not an error: it returns ``moved=False`` with an identical board, and the
    caller must not spawn a tile.
    """
    cells = validate_board(board)
    direction = Direction.parse(direction)
    target_value = check_target(target_value)

    canonical = to_canonical(cells, direction)
    score, merged = slide_and_merge(canonical)
    moved = not array_equal(canonical, merged)

    result = freeze(array(from_canonical(merged, direction))) if moved else cells
    return MoveResult(
        board=result,
        score_delta=score,
        moved=moved,
        reached_target=bool((result == target_value).any()),
    )


def spawn(board: ndarray, rng: RandomSource) -> ndarray:
    """
    Place one new tile (2 or 4) in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The current game board. It is never modified.
    rng : RandomSource
        Source of randomness, e.g. ``numpy.random.default_rng(seed)``.

    Returns
    -------
    ndarray
        A new read-only board with one more tile, or the same values if the board is full.

    Notes
    -----
    - The cell is drawn first, uniformly among empty cells in row-major order, then the value.
    - New tiles have a 90% chance of being 2 and a 10% chance of being 4.
    - A full board is returned unchanged without consuming randomness.
    """
    cells = validate_board(board)
    available = empty_cells(cells)
    if not available:
        return cells

    row, column = available[int(rng.integers(len(available)))]
    value = 2 if rng.random() < TILE_SPAWN_PROBS[2] else 4

    spawned = cells.copy()
    spawned[row, column] = value
    return freeze(spawned)


def after_states(board: ndarray) -> list[tuple[ndarray, float]]:
    """
    Generate all possible boards after a spawn, with their probabilities.

    Parameters
    ----------
    board : ndarray
        The board after a move, before the spawn.

    Returns
    -------
    list of tuple
        A list of tuples, each containing:
        - A possible next board (ndarray)
        - The probability of that board occurring (float)

    Notes
    -----
    - If there are no empty cells, it returns the board with 100% probability.
    - Probabilities account for both empty cell selection and new tile value (2 or 4).
    """
    cells = validate_board(board)
    available = empty_cells(cells)
    if not available:
        return [(cells, 1.0)]

    outcomes = []
    for cell in available:
        for value, probability in TILE_SPAWN_PROBS.items():
            outcome = cells.copy()
            outcome[cell] = value
            outcomes.append((freeze(outcome), probability / len(available)))
    return outcomes
