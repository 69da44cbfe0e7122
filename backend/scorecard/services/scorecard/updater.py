from typing import Dict, List

from .entities import HoleScore


def build_hole_update(hole_key, scores: List[HoleScore]) -> Dict[str, List[HoleScore]]:
    """Field update replacing the whole score list of one hole.

    No merge with what is stored and no validation: the caller's list is
    written as given and the last write wins.
    """
    return {f'holes.{hole_key}': scores}
