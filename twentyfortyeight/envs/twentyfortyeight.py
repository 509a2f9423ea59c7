"""Stateful 2048 game session built on the pure engine functions."""

import logging

from numpy import ndarray
from numpy.random import default_rng

from twentyfortyeight.config import BOARD_SIZE, GameConfig
from twentyfortyeight.core.gamemove import Direction
from twentyfortyeight.core.terminal import GameStatus
from twentyfortyeight.game import GameState, apply_move, new_game

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class TwentyFortyEight:
    """
    2048 game session.

    This class keeps the board, the score and the status of one game, so that a caller can play with
    ``step`` instead of carrying the state between engine calls.
    """

    # ##: All Actions.
    ACTIONS = {direction.name.lower(): direction for direction in Direction}

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the game session.

        Parameters
        ----------
        config : GameConfig, optional
            Target value and seed of the session (default is ``GameConfig()``).
        """
        self.config = config or GameConfig()
        self.size = BOARD_SIZE
        self._rng = default_rng(self.config.seed)
        self._state: GameState | None = None
        self._reward = 0

        self.reset()

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game is won or lost, False otherwise.
        """
        return self._state.status is not GameStatus.IN_PROGRESS

    @property
    def observation(self) -> ndarray:
        """The current read-only game board."""
        return self._state.board

    @property
    def score(self) -> int:
        """The score accumulated since the last reset."""
        return self._state.score

    @property
    def status(self) -> GameStatus:
        """The status of the current board."""
        return self._state.status

    @property
    def reward(self) -> int:
        """The score gained by the last step."""
        return self._reward

    @property
    def state(self) -> GameState:
        """The full (board, score, status) triple."""
        return self._state

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game on an empty board with two random tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the session generator before dealing the opening tiles.

        Returns
        -------
        ndarray
            The new game board.
        """
        if seed is not None:
            self._rng = default_rng(seed)
        self._state = new_game(target_value=self.config.target_value, rng=self._rng)
        self._reward = 0
        return self.observation

    def step(self, action) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the board.

        Parameters
        ----------
        action : Direction, int or str
            The move, as a direction, an action number (0: left, 1: up, 2: right, 3: down) or a name.

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The updated game board (ndarray)
            - The score gained by this move (int)
            - Whether the game is finished (bool)

        Notes
        -----
        - A move that changes nothing gains nothing and adds no tile.
        - Once the game is won or lost, moves are ignored until ``reset``.
        """
        direction = Direction.parse(action)
        if self.is_finished:
            _logger.debug('Ignoring %s, game already %s', direction.name, self.status.value)
            self._reward = 0
            return self.observation, self._reward, True

        previous = self._state.score
        self._state = apply_move(
            board=self._state.board,
            score=previous,
            direction=direction,
            target_value=self.config.target_value,
            rng=self._rng,
        )
        self._reward = self._state.score - previous
        return self.observation, self._reward, self.is_finished

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self._state.board.tolist():
            print(' \t'.join(map(str, row)))
        print(f'score={self.score} status={self.status.value}')
