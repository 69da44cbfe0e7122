"""Scorecard domain logic: building the score grid, applying hole updates
and aggregating totals for display.

Everything in this package works on plain dicts and is free of I/O, so the
HTTP routes and the game service can call it directly.
"""
from .aggregator import aggregate_player_information
from .initializer import initialize_scorecard
from .updater import build_hole_update

__all__ = ['aggregate_player_information', 'initialize_scorecard', 'build_hole_update']
