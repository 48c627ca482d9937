# src/montyhall/simulation/trial_runner.py
"""
Single trial - one complete play-through of the game

Both strategies are judged against the same layout, pick and opened door,
so each trial gives a paired STAY/SWITCH comparison.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from src.montyhall.game.game_setup import create_game, select_door
from src.montyhall.game.host_reveal import open_goat_door
from src.montyhall.game.outcome_judge import determine_winner
from src.montyhall.game.types import Strategy, TrialRecord
from src.montyhall.strategies.strategy_resolver import change_door
from src.montyhall.utils.random_source import ensure_rng

logger = logging.getLogger(__name__)


def play_game(rng: Optional[np.random.Generator] = None, trial: int = 0) -> Tuple[TrialRecord, TrialRecord]:
    """
    Play one game and judge both strategies

    Args:
        rng: Random source shared by every draw in the trial
        trial: Index stored on both records

    Returns:
        (STAY record, SWITCH record)
    """
    rng = ensure_rng(rng)

    new_game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(new_game, first_pick, rng)

    final_pick_stay = change_door(stay=True, opened_door=opened_door, pick=first_pick)
    final_pick_switch = change_door(stay=False, opened_door=opened_door, pick=first_pick)

    outcome_stay = determine_winner(final_pick_stay, new_game)
    outcome_switch = determine_winner(final_pick_switch, new_game)

    logger.debug(f"Trial {trial}: game=[{new_game}] pick={first_pick} opened={opened_door} "
                 f"stay={outcome_stay.value} switch={outcome_switch.value}")

    return (
        TrialRecord(strategy=Strategy.STAY, outcome=outcome_stay, trial=trial),
        TrialRecord(strategy=Strategy.SWITCH, outcome=outcome_switch, trial=trial),
    )
