# -*- coding: utf-8 -*-
"""
This module provides helpers around game states.

It includes functions to flatten a state into plain values (a list of 16 cells, a score and a status tag) and
to rebuild it.
"""

from .snapshot import from_snapshot, to_snapshot

__all__ = ["from_snapshot", "to_snapshot"]
