# src/montyhall/game/game_setup.py
"""
Game setup and the contestant's first pick

The two draws are independent: the contestant knows nothing about the layout.
"""

from typing import Optional

import numpy as np

from src.montyhall.game.types import DOORS, DoorLabel, GameSetup
from src.montyhall.utils.random_source import ensure_rng

# One car and two goats; shuffled per game
_PRIZE_POOL = (DoorLabel.GOAT, DoorLabel.GOAT, DoorLabel.CAR)


def create_game(rng: Optional[np.random.Generator] = None) -> GameSetup:
    """
    Create a new game with two goats and one car behind the three doors

    Every car position has probability 1/3.

    Args:
        rng: Random source (None = fresh unseeded generator)

    Returns:
        Immutable GameSetup
    """
    rng = ensure_rng(rng)
    order = rng.permutation(len(_PRIZE_POOL))
    return GameSetup(tuple(_PRIZE_POOL[i] for i in order))


def select_door(rng: Optional[np.random.Generator] = None) -> int:
    """Contestant's initial pick, uniform over doors 1, 2 and 3"""
    rng = ensure_rng(rng)
    return int(rng.integers(DOORS[0], DOORS[-1] + 1))
