"""Game lifecycle services.

Sequences the scorecard logic against the document store for the games
API, keeping transport concerns out of the game rules.
"""
from .lifecycle import GameService

__all__ = ['GameService']
