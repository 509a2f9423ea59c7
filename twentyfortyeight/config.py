"""
Configuration for the 2048 grid engine.
"""

from dataclasses import dataclass
from numbers import Integral

# ##>: The board is always square with this many rows and columns.
BOARD_SIZE = 4

# ##>: Tile value that wins the game unless a caller asks for another target.
DEFAULT_TARGET = 2048

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def check_target(target_value: int) -> int:
    """
    Validate a win threshold.

    Parameters
    ----------
    target_value : int
        Tile value that wins the game.

    Returns
    -------
    int
        The value as a Python integer.

    Raises
    ------
    ValueError
        If the value is not a power of two greater or equal to 4.
    """
    if isinstance(target_value, bool) or not isinstance(target_value, Integral):
        raise ValueError(f'target_value must be an integer, got {target_value!r}')

    target_value = int(target_value)
    if target_value < 4 or target_value & (target_value - 1):
        raise ValueError(f'target_value must be a power of two >= 4, got {target_value}')
    return target_value


def check_score(score: int) -> int:
    """
    Validate an accumulated score.

    Parameters
    ----------
    score : int
        The score to check. Numpy integers are accepted.

    Returns
    -------
    int
        The score as a Python integer.

    Raises
    ------
    ValueError
        If the score is not a non-negative integer.
    """
    if isinstance(score, bool) or not isinstance(score, Integral) or score < 0:
        raise ValueError(f'score must be a non-negative integer, got {score!r}')
    return int(score)


@dataclass
class GameConfig:
    """
    Settings of one game session.

    Attributes
    ----------
    target_value : int
        Tile value that wins the game.
    seed : int, optional
        Seed of the session random generator; None draws fresh entropy.
    """

    target_value: int = DEFAULT_TARGET
    seed: int | None = None

    def __post_init__(self):
        self.target_value = check_target(self.target_value)
        if self.seed is not None and self.seed < 0:
            raise ValueError(f'seed must be non-negative, got {self.seed}')
