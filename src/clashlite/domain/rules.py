"""Numeric constants of the battle ruleset."""
from __future__ import annotations

LANE_MIN = 0
LANE_MAX = 9
UNDEPLOYED = -1

STARTING_ELIXIR = 5
MAX_ELIXIR = 10
ELIXIR_REGEN_PER_TURN = 1

STARTING_TOWER_HEALTH = 100
HAND_SIZE = 4
MAX_TURNS = 100
