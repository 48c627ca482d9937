# types.py
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np

from src.montyhall.game.errors import InvalidArgumentError, MalformedStateError

DOORS: Tuple[int, ...] = (1, 2, 3)


class DoorLabel(Enum):
    """What stands behind a door"""
    CAR = "car"
    GOAT = "goat"


class Strategy(Enum):
    """Contestant decision rule after the host opens a door"""
    STAY = "stay"
    SWITCH = "switch"

    @classmethod
    def from_name(cls, name: str) -> "Strategy":
        try:
            return cls(name.lower())
        except (ValueError, AttributeError):
            available = [s.value for s in cls]
            raise InvalidArgumentError(f"Unknown strategy: {name}. Available: {available}")


class Outcome(Enum):
    """Result of a final pick"""
    WIN = "WIN"
    LOSE = "LOSE"


def validate_door(door, name: str = "door") -> int:
    """Return door as an int if it is a valid position, raise InvalidArgumentError otherwise"""
    # bool is an int subclass but never a door
    if isinstance(door, bool) or not isinstance(door, (int, np.integer)) or door not in DOORS:
        raise InvalidArgumentError(f"{name} must be one of {DOORS}, got {door!r}")
    return int(door)


@dataclass(frozen=True)
class GameSetup:
    """
    Hidden layout of one game

    labels[0] is behind door 1, labels[1] behind door 2, labels[2] behind door 3.
    Exactly one door hides the car.
    """
    labels: Tuple[DoorLabel, DoorLabel, DoorLabel]

    def __post_init__(self):
        labels = tuple(self.labels)
        if len(labels) != len(DOORS):
            raise MalformedStateError(f"Game must have {len(DOORS)} doors, got {len(labels)}")
        if not all(isinstance(label, DoorLabel) for label in labels):
            raise MalformedStateError(f"Game labels must be DoorLabel values, got {labels}")
        car_count = labels.count(DoorLabel.CAR)
        if car_count != 1:
            raise MalformedStateError(f"Game must hide exactly one car, found {car_count}")
        object.__setattr__(self, 'labels', labels)

    @classmethod
    def from_names(cls, names) -> "GameSetup":
        """Build a setup from label names, e.g. ["goat", "goat", "car"]"""
        try:
            return cls(tuple(DoorLabel(name) for name in names))
        except ValueError as e:
            raise MalformedStateError(f"Invalid game labels {list(names)}: {e}")

    def label_at(self, door: int) -> DoorLabel:
        validate_door(door)
        return self.labels[door - 1]

    @property
    def car_door(self) -> int:
        return self.labels.index(DoorLabel.CAR) + 1

    def __str__(self) -> str:
        return ' '.join(label.value for label in self.labels)


@dataclass(frozen=True)
class TrialRecord:
    """One strategy's outcome in one trial"""
    strategy: Strategy
    outcome: Outcome
    trial: int = 0
