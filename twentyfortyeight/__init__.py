# -*- coding: utf-8 -*-
"""
Deterministic 2048 grid engine.

Resolve slides and merges on a 4x4 board, spawn tiles from an injected random source and detect won or lost
boards. ``new_game``, ``apply_move`` and ``status`` are the entry points; the caller keeps the state.
"""

from .config import BOARD_SIZE, DEFAULT_TARGET, GameConfig
from .core import (
    Direction,
    GameStatus,
    InvalidBoard,
    MoveResult,
    RandomSource,
    after_states,
    legal_directions,
    resolve,
    spawn,
    status,
)
from .game import GameState, apply_move, new_game

__all__ = [
    "BOARD_SIZE",
    "DEFAULT_TARGET",
    "GameConfig",
    "Direction",
    "GameStatus",
    "InvalidBoard",
    "MoveResult",
    "RandomSource",
    "after_states",
    "legal_directions",
    "resolve",
    "spawn",
    "status",
    "GameState",
    "apply_move",
    "new_game",
]
