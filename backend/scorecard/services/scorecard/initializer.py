from typing import List, Sequence, Tuple

from .entities import HoleMap, HoleScore, IndexedPlayer, Player


def initialize_scorecard(players: Sequence[Player], number_holes: int) -> Tuple[List[IndexedPlayer], HoleMap]:
    """Index the roster and build an empty score grid.

    Each player gets ``scorecardIndex`` equal to its position in ``players``.
    Holes are keyed ``"1"`` to ``str(number_holes)``; every hole lists one
    unrecorded score per player in roster order. Inputs are assumed valid.
    """
    indexed_players: List[IndexedPlayer] = []
    for index, player in enumerate(players):
        indexed: IndexedPlayer = {'name': player['name'], 'scorecardIndex': index}
        if player.get('uid') is not None:
            indexed['uid'] = player['uid']
        indexed_players.append(indexed)

    holes: HoleMap = {}
    for hole_number in range(1, number_holes + 1):
        hole_scores: List[HoleScore] = [
            {'scorecardIndex': p['scorecardIndex'], 'score': None} for p in indexed_players
        ]
        holes[str(hole_number)] = hole_scores

    return indexed_players, holes
