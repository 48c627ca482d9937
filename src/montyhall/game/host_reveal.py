# src/montyhall/game/host_reveal.py
"""
Host reveal - the host opens a goat door the contestant did not pick

Single rule for both cases: the candidates are the goat doors other than the
pick. A car pick leaves two candidates and the host chooses one uniformly; a
goat pick leaves exactly one.
"""

from typing import List, Optional

import numpy as np

from src.montyhall.game.errors import MalformedStateError
from src.montyhall.game.types import DOORS, DoorLabel, GameSetup, validate_door
from src.montyhall.utils.random_source import ensure_rng


def goat_doors_for_host(game: GameSetup, pick: int) -> List[int]:
    """Doors the host may open: not the car and not the pick"""
    pick = validate_door(pick, "pick")
    return [door for door in DOORS
            if game.label_at(door) is not DoorLabel.CAR and door != pick]


def open_goat_door(game: GameSetup, pick: int,
                   rng: Optional[np.random.Generator] = None) -> int:
    """
    Choose the door the host opens

    Args:
        game: Hidden layout
        pick: Contestant's current pick
        rng: Random source, only drawn from when the pick hides the car

    Returns:
        Door number that hides a goat and differs from pick
    """
    candidates = goat_doors_for_host(game, pick)

    if len(candidates) == 1:
        return candidates[0]
    if len(candidates) == 2:
        rng = ensure_rng(rng)
        return int(candidates[rng.integers(len(candidates))])

    raise MalformedStateError(
        f"Host has {len(candidates)} doors to open for game '{game}' and pick {pick}")
