# src/montyhall/game/__init__.py
from .errors import MontyHallError, InvalidArgumentError, MalformedStateError
from .types import DOORS, DoorLabel, Strategy, Outcome, GameSetup, TrialRecord, validate_door
from .game_setup import create_game, select_door
from .host_reveal import open_goat_door
from .outcome_judge import determine_winner

__all__ = [
    'MontyHallError',
    'InvalidArgumentError',
    'MalformedStateError',
    'DOORS',
    'DoorLabel',
    'Strategy',
    'Outcome',
    'GameSetup',
    'TrialRecord',
    'validate_door',
    'create_game',
    'select_door',
    'open_goat_door',
    'determine_winner',
]
