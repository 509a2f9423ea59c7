# -*- coding: utf-8 -*-
"""
Stateful session for the 2048 game.

This module provides the `TwentyFortyEight` class, which keeps the board, score and status of one game between
moves.
"""

from .twentyfortyeight import TwentyFortyEight

__all__ = ["TwentyFortyEight"]
