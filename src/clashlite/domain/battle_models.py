"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass

from clashlite.core.rng import RNG
from clashlite.core.types import BattleOutcome, BattleStatus, Side
from clashlite.domain import rules
from clashlite.domain.combatant import Combatant


@dataclass(slots=True)
class CombatantStatusView:
    """Read-only snapshot used for rendering a combatant's status line."""

    name: str
    side: Side
    tower_health: int
    elixir: int
    troop_count: int
    hand_size: int
    deck_size: int


@dataclass(slots=True)
class BattleState:
    """Tracks the state of a battle from setup to its outcome."""

    battle_id: str
    rng: RNG
    player_one: Combatant
    player_two: Combatant
    turn: int = 0
    max_turns: int = rules.MAX_TURNS
    status: BattleStatus = "not_started"
    outcome: BattleOutcome | None = None

    @property
    def is_over(self) -> bool:
        return self.status == "ended"

    @property
    def winner(self) -> Combatant | None:
        if self.outcome == "player_one":
            return self.player_one
        if self.outcome == "player_two":
            return self.player_two
        return None

    def matchups(self) -> tuple[tuple[Combatant, Combatant], tuple[Combatant, Combatant]]:
        """Return (owner, opponent) pairs in phase order, player one first."""
        return (self.player_one, self.player_two), (self.player_two, self.player_one)
