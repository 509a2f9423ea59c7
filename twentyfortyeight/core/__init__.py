# -*- coding: utf-8 -*-
"""
This module provides the building blocks of the 2048 grid engine.

It includes board validation, direction handling, move resolution, tile spawning, enumeration of spawn outcomes
and terminal state detection.
"""

from .board import InvalidBoard, empty_board, empty_cells, max_tile, validate_board
from .gameboard import MoveResult, RandomSource, after_states, merge_row, resolve, slide_and_merge, spawn
from .gamemove import Direction, legal_directions, legal_directions_mask
from .terminal import GameStatus, is_done, status

__all__ = [
    "InvalidBoard",
    "empty_board",
    "empty_cells",
    "max_tile",
    "validate_board",
    "MoveResult",
    "RandomSource",
    "after_states",
    "merge_row",
    "resolve",
    "slide_and_merge",
    "spawn",
    "Direction",
    "legal_directions",
    "legal_directions_mask",
    "GameStatus",
    "is_done",
    "status",
]
