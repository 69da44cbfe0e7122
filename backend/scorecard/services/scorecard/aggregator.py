import copy
from typing import List, Tuple

from .entities import Game, HoleMap, HoleScore, ScoredPlayer


def _copy_holes(holes) -> HoleMap:
    copied: HoleMap = {}
    for key, hole_scores in (holes or {}).items():
        if not isinstance(hole_scores, list):
            # e.g. a hole overwritten with null; passed through, nothing to score
            copied[key] = copy.deepcopy(hole_scores)
            continue
        copied[key] = [
            {k: v for k, v in hole_score.items() if k != 'name'}
            if isinstance(hole_score, dict) else copy.deepcopy(hole_score)
            for hole_score in hole_scores
        ]
    return copied


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _points(hole_score: HoleScore) -> int:
    score = hole_score.get('score')
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        return 0
    return score


def _find_score(hole_scores, scorecard_index):
    for hole_score in hole_scores:
        if not isinstance(hole_score, dict):
            continue
        index = hole_score.get('scorecardIndex')
        if _is_index(index) and index == scorecard_index:
            return hole_score
    return None


def aggregate_player_information(game: Game) -> Tuple[HoleMap, List[ScoredPlayer]]:
    """Total each player's scores and label hole scores with player names.

    For every player, the first score in each hole with a matching
    ``scorecardIndex`` is labelled with the player's name and added to the
    player's ``totalScore`` (unrecorded scores count as 0). Only integer
    indexes match. Scores whose index matches no player are left unlabelled
    and count towards nobody; malformed entries are passed through as stored.

    The game passed in is not modified.
    """
    holes = _copy_holes(game.get('holes'))
    players: List[ScoredPlayer] = []

    for player in game.get('players') or []:
        scored: ScoredPlayer = {**player, 'totalScore': 0}

        for hole_scores in holes.values():
            if not isinstance(hole_scores, list):
                continue
            match = _find_score(hole_scores, player['scorecardIndex'])
            if match is not None:
                match['name'] = player['name']
                scored['totalScore'] += _points(match)

        players.append(scored)

    return holes, players
