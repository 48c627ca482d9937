# src/montyhall/game/outcome_judge.py
from src.montyhall.game.errors import MalformedStateError
from src.montyhall.game.types import DoorLabel, GameSetup, Outcome


def determine_winner(final_pick: int, game: GameSetup) -> Outcome:
    """WIN when the final pick hides the car, LOSE when it hides a goat"""
    label = game.label_at(final_pick)

    if label is DoorLabel.CAR:
        return Outcome.WIN
    if label is DoorLabel.GOAT:
        return Outcome.LOSE

    raise MalformedStateError(f"Door {final_pick} has unknown label {label!r}")
