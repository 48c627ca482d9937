# strategy_resolver.py
# Final pick after the host has opened a door

from src.montyhall.game.errors import MalformedStateError
from src.montyhall.game.types import DOORS, Strategy, validate_door


def change_door(stay: bool = True, *, opened_door: int, pick: int) -> int:
    """
    Keep the current pick or switch to the last closed door

    Args:
        stay: True keeps pick, False switches
        opened_door: Door the host opened
        pick: Contestant's initial pick

    Returns:
        Final pick
    """
    opened_door = validate_door(opened_door, "opened_door")
    pick = validate_door(pick, "pick")

    if stay:
        return pick

    remaining = [door for door in DOORS if door != opened_door and door != pick]
    if len(remaining) != 1:
        raise MalformedStateError(
            f"No unique door to switch to: opened_door={opened_door}, pick={pick}")
    return remaining[0]


def resolve_final_pick(strategy: Strategy, opened_door: int, pick: int) -> int:
    """Strategy-typed variant of change_door"""
    if not isinstance(strategy, Strategy):
        strategy = Strategy.from_name(strategy)
    return change_door(stay=strategy is Strategy.STAY, opened_door=opened_door, pick=pick)
