# src/montyhall/strategies/__init__.py
# Strategies package initialization

from src.montyhall.game.types import Strategy
from .strategy_resolver import change_door, resolve_final_pick

__all__ = ['Strategy', 'change_door', 'resolve_final_pick']
