"""Shapes of the documents the scorecard logic passes around.

Hole keys (``"1"``, ``"2"``, ...) address entries of the hole map, while a
player's ``scorecardIndex`` matches that player's entry inside each hole's
score list. The two are separate identifier spaces.
"""
from typing import Dict, List, Optional, TypedDict


class _PlayerBase(TypedDict):
    name: str


class Player(_PlayerBase, total=False):
    uid: str


class IndexedPlayer(Player):
    scorecardIndex: int


class ScoredPlayer(IndexedPlayer):
    totalScore: int


class _HoleScoreBase(TypedDict):
    scorecardIndex: int
    score: Optional[int]


class HoleScore(_HoleScoreBase, total=False):
    # only present on aggregated views
    name: str


HoleMap = Dict[str, List[HoleScore]]


class Game(TypedDict):
    title: str
    date: str
    userId: str
    players: List[IndexedPlayer]
    holes: HoleMap
