"""Combatant state: elixir, deck, hand, deployed troops and tower."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List

from clashlite.core.types import Side
from clashlite.domain import rules
from clashlite.domain.cards import SpellResult, Troop, cast_spell
from clashlite.domain.defs import CardDef

TroopIdFactory = Callable[[CardDef], str]


@dataclass(slots=True)
class PlayResult:
    """Describes the card a combatant just played."""

    card: CardDef
    elixir_spent: int
    drawn: CardDef | None = None
    troop: Troop | None = None
    spell: SpellResult | None = None


@dataclass(slots=True, eq=False)
class Combatant:
    """One side of the battle.

    ``player_one`` deploys at lane 0 and advances toward 9; ``player_two``
    deploys at 9 and advances toward 0.
    """

    name: str
    side: Side
    deck: List[CardDef] = field(default_factory=list)
    hand: List[CardDef] = field(default_factory=list)
    troops: List[Troop] = field(default_factory=list)
    elixir: int = rules.STARTING_ELIXIR
    max_elixir: int = rules.MAX_ELIXIR
    tower_health: int = rules.STARTING_TOWER_HEALTH

    @property
    def advances_right(self) -> bool:
        return self.side == "player_one"

    @property
    def deploy_position(self) -> int:
        return rules.LANE_MIN if self.advances_right else rules.LANE_MAX

    @property
    def target_edge(self) -> int:
        return rules.LANE_MAX if self.advances_right else rules.LANE_MIN

    @property
    def is_defeated(self) -> bool:
        return self.tower_health <= 0

    def regenerate_elixir(self) -> None:
        self.elixir = min(self.elixir + rules.ELIXIR_REGEN_PER_TURN, self.max_elixir)

    def draw_card(self) -> CardDef | None:
        """Move the front card of the deck into the hand."""
        if not self.deck:
            return None
        card = self.deck.pop(0)
        self.hand.append(card)
        return card

    def draw_initial_hand(self) -> None:
        while len(self.hand) < rules.HAND_SIZE and self.deck:
            self.draw_card()

    def first_affordable_index(self) -> int | None:
        for index, card in enumerate(self.hand):
            if card.elixir_cost <= self.elixir:
                return index
        return None

    def play_card(self, opponent: Combatant, make_troop_id: TroopIdFactory) -> PlayResult | None:
        """Play the first affordable card in hand order.

        Returns None when the hand is empty or nothing is affordable.
        """
        index = self.first_affordable_index()
        if index is None:
            return None

        card = self.hand.pop(index)
        self.elixir -= card.elixir_cost
        drawn = self.draw_card()
        result = PlayResult(card=card, elixir_spent=card.elixir_cost, drawn=drawn)

        if card.kind == "troop":
            troop = Troop.from_def(card, make_troop_id(card))
            troop.deploy(self.deploy_position)
            self.troops.append(troop)
            result.troop = troop
        elif card.kind == "spell":
            result.spell = cast_spell(card, opponent.troops)
        else:
            raise ValueError(f"Unknown card kind: {card.kind}")
        return result

    def remove_dead_troops(self) -> List[Troop]:
        dead = [troop for troop in self.troops if not troop.is_alive]
        for troop in dead:
            self.troops.remove(troop)
        return dead

    def troops_at_target_edge(self) -> List[Troop]:
        return [troop for troop in self.troops if troop.is_alive and troop.position == self.target_edge]

    def damage_tower(self, amount: int) -> None:
        self.tower_health -= amount
