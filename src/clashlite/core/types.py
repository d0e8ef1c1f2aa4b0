"""Shared type aliases for the core and domain layers."""
from typing import Literal

CardKind = Literal["troop", "spell"]
Side = Literal["player_one", "player_two"]
BattleStatus = Literal["not_started", "running", "ended"]
BattleOutcome = Literal["player_one", "player_two", "draw"]

__all__ = ["BattleOutcome", "BattleStatus", "CardKind", "Side"]
