"""Battle service running the turn-stepped lane simulation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from clashlite.core.rng import RNG
from clashlite.core.types import BattleOutcome, CardKind
from clashlite.data.repositories import CardsRepository, DecksRepository
from clashlite.domain import rules
from clashlite.domain.battle_models import BattleState, CombatantStatusView
from clashlite.domain.cards import perform_troop_action
from clashlite.domain.combatant import Combatant, PlayResult
from clashlite.domain.defs import CardDef
from clashlite.services.factories import create_combatant, create_deck, make_instance_id

DEFAULT_DECK_ID = "starter"


@dataclass(slots=True)
class BattleEvent:
    """Base battle event."""


@dataclass(slots=True)
class BattleStartedEvent(BattleEvent):
    battle_id: str
    player_one_name: str
    player_two_name: str


@dataclass(slots=True)
class TurnStartedEvent(BattleEvent):
    turn: int


@dataclass(slots=True)
class CardPlayedEvent(BattleEvent):
    player_name: str
    card_name: str
    card_kind: CardKind
    elixir_cost: int
    elixir_remaining: int
    troop_id: str | None = None
    position: int | None = None


@dataclass(slots=True)
class SpellCastEvent(BattleEvent):
    player_name: str
    spell_name: str
    area_damage: int
    troops_hit: int
    troops_defeated: int


@dataclass(slots=True)
class TroopAttackEvent(BattleEvent):
    attacker_id: str
    attacker_name: str
    target_id: str
    target_name: str
    damage: int
    target_hp: int


@dataclass(slots=True)
class TroopMovedEvent(BattleEvent):
    troop_id: str
    troop_name: str
    owner_name: str
    position: int


@dataclass(slots=True)
class TroopDefeatedEvent(BattleEvent):
    troop_id: str
    troop_name: str
    owner_name: str


@dataclass(slots=True)
class TowerDamagedEvent(BattleEvent):
    attacker_id: str
    attacker_name: str
    tower_owner_name: str
    damage: int
    tower_health: int


@dataclass(slots=True)
class TurnStatusEvent(BattleEvent):
    turn: int
    statuses: List[CombatantStatusView]


@dataclass(slots=True)
class BattleResolvedEvent(BattleEvent):
    outcome: BattleOutcome
    winner_name: str | None
    turns: int


class BattleService:
    """Deterministic battle orchestrator for two combatants sharing one lane.

    Each turn runs fixed phases: elixir regeneration, one card play per
    combatant (player one first), troop actions (player one's troops first),
    tower damage, then the status report and the end-of-battle check.
    """

    def __init__(self, cards_repo: CardsRepository, decks_repo: DecksRepository) -> None:
        self._cards_repo = cards_repo
        self._decks_repo = decks_repo

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def create_battle(
        self,
        player_one_name: str,
        player_two_name: str,
        rng: RNG,
        *,
        deck_id: str = DEFAULT_DECK_ID,
        max_turns: int = rules.MAX_TURNS,
    ) -> BattleState:
        """Build both decks and combatants; the battle is not started yet."""
        player_one = create_combatant(player_one_name, "player_one", self._build_deck(deck_id), rng)
        player_two = create_combatant(player_two_name, "player_two", self._build_deck(deck_id), rng)
        return BattleState(
            battle_id=make_instance_id("battle", rng),
            rng=rng,
            player_one=player_one,
            player_two=player_two,
            max_turns=max_turns,
        )

    def start_battle(self, battle_state: BattleState) -> List[BattleEvent]:
        """Move a freshly created battle into the running state."""
        if battle_state.status != "not_started":
            raise ValueError(f"Battle '{battle_state.battle_id}' has already been started.")
        battle_state.status = "running"
        events: List[BattleEvent] = [
            BattleStartedEvent(
                battle_id=battle_state.battle_id,
                player_one_name=battle_state.player_one.name,
                player_two_name=battle_state.player_two.name,
            )
        ]
        if self._should_end(battle_state):
            events.append(self._resolve_outcome(battle_state))
        return events

    def run_turn(self, battle_state: BattleState) -> List[BattleEvent]:
        """Advance the battle by exactly one turn and return what happened."""
        if battle_state.status != "running":
            raise ValueError(f"Battle '{battle_state.battle_id}' is not running ({battle_state.status}).")

        battle_state.turn += 1
        events: List[BattleEvent] = [TurnStartedEvent(turn=battle_state.turn)]

        for combatant, _ in battle_state.matchups():
            combatant.regenerate_elixir()

        for owner, opponent in battle_state.matchups():
            events.extend(self._play_phase(battle_state, owner, opponent))

        for owner, opponent in battle_state.matchups():
            events.extend(self._resolve_troops(owner, opponent))

        for owner, opponent in battle_state.matchups():
            events.extend(self._attack_tower(owner, opponent))

        events.append(TurnStatusEvent(turn=battle_state.turn, statuses=self.get_status_views(battle_state)))

        if self._should_end(battle_state):
            events.append(self._resolve_outcome(battle_state))
        return events

    def run_battle(self, battle_state: BattleState) -> List[BattleEvent]:
        """Run the battle to completion, starting it first if needed."""
        events: List[BattleEvent] = []
        if battle_state.status == "not_started":
            events.extend(self.start_battle(battle_state))
        while not battle_state.is_over:
            events.extend(self.run_turn(battle_state))
        return events

    def get_status_views(self, battle_state: BattleState) -> List[CombatantStatusView]:
        """Return structured status for both combatants, player one first."""
        return [self._to_view(battle_state.player_one), self._to_view(battle_state.player_two)]

    # -----------------------
    # Turn Phases
    # -----------------------
    def _play_phase(self, battle_state: BattleState, owner: Combatant, opponent: Combatant) -> List[BattleEvent]:
        def make_troop_id(card: CardDef) -> str:
            return make_instance_id(card.id, battle_state.rng)

        result = owner.play_card(opponent, make_troop_id)
        if result is None:
            return []
        return self._play_events(owner, opponent, result)

    def _play_events(self, owner: Combatant, opponent: Combatant, result: PlayResult) -> List[BattleEvent]:
        events: List[BattleEvent] = [
            CardPlayedEvent(
                player_name=owner.name,
                card_name=result.card.name,
                card_kind=result.card.kind,
                elixir_cost=result.elixir_spent,
                elixir_remaining=owner.elixir,
                troop_id=result.troop.instance_id if result.troop else None,
                position=result.troop.position if result.troop else None,
            )
        ]
        if result.spell is not None:
            events.append(
                SpellCastEvent(
                    player_name=owner.name,
                    spell_name=result.card.name,
                    area_damage=result.card.area_damage,
                    troops_hit=len(result.spell.troops_hit),
                    troops_defeated=len(result.spell.troops_defeated),
                )
            )
            for troop in result.spell.troops_defeated:
                events.append(
                    TroopDefeatedEvent(troop_id=troop.instance_id, troop_name=troop.name, owner_name=opponent.name)
                )
        return events

    def _resolve_troops(self, owner: Combatant, opponent: Combatant) -> List[BattleEvent]:
        events: List[BattleEvent] = []
        # Iterate a snapshot; removals only touch the opponent's list mid-pass.
        for troop in list(owner.troops):
            result = perform_troop_action(troop, opponent.troops, advances_right=owner.advances_right)
            if result.action == "attack" and result.target is not None:
                events.append(
                    TroopAttackEvent(
                        attacker_id=troop.instance_id,
                        attacker_name=troop.name,
                        target_id=result.target.instance_id,
                        target_name=result.target.name,
                        damage=result.damage,
                        target_hp=result.target.hit_points,
                    )
                )
                if result.target_defeated:
                    events.append(
                        TroopDefeatedEvent(
                            troop_id=result.target.instance_id,
                            troop_name=result.target.name,
                            owner_name=opponent.name,
                        )
                    )
            elif result.action == "move":
                events.append(
                    TroopMovedEvent(
                        troop_id=troop.instance_id,
                        troop_name=troop.name,
                        owner_name=owner.name,
                        position=troop.position,
                    )
                )

        for troop in owner.remove_dead_troops():
            events.append(TroopDefeatedEvent(troop_id=troop.instance_id, troop_name=troop.name, owner_name=owner.name))
        return events

    def _attack_tower(self, owner: Combatant, opponent: Combatant) -> List[BattleEvent]:
        events: List[BattleEvent] = []
        for troop in owner.troops_at_target_edge():
            opponent.damage_tower(troop.damage)
            events.append(
                TowerDamagedEvent(
                    attacker_id=troop.instance_id,
                    attacker_name=troop.name,
                    tower_owner_name=opponent.name,
                    damage=troop.damage,
                    tower_health=opponent.tower_health,
                )
            )
        return events

    # -----------------------
    # Helpers
    # -----------------------
    def _build_deck(self, deck_id: str) -> List[CardDef]:
        return create_deck(deck_id, cards_repo=self._cards_repo, decks_repo=self._decks_repo)

    def _should_end(self, battle_state: BattleState) -> bool:
        return (
            battle_state.player_one.is_defeated
            or battle_state.player_two.is_defeated
            or battle_state.turn >= battle_state.max_turns
        )

    def _resolve_outcome(self, battle_state: BattleState) -> BattleResolvedEvent:
        # Player one's defeat is checked first, so a double knockout goes to player two.
        outcome: BattleOutcome
        if battle_state.player_one.is_defeated:
            outcome = "player_two"
        elif battle_state.player_two.is_defeated:
            outcome = "player_one"
        else:
            outcome = "draw"
        battle_state.status = "ended"
        battle_state.outcome = outcome
        winner = battle_state.winner
        return BattleResolvedEvent(
            outcome=outcome,
            winner_name=winner.name if winner else None,
            turns=battle_state.turn,
        )

    def _to_view(self, combatant: Combatant) -> CombatantStatusView:
        return CombatantStatusView(
            name=combatant.name,
            side=combatant.side,
            tower_health=combatant.tower_health,
            elixir=combatant.elixir,
            troop_count=len(combatant.troops),
            hand_size=len(combatant.hand),
            deck_size=len(combatant.deck),
        )
