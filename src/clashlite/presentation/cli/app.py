"""Console runner that simulates one battle and prints it turn by turn."""
from __future__ import annotations

import secrets
from pathlib import Path
from typing import List, Sequence

from clashlite.core.rng import RNG
from clashlite.data.repositories import CardsRepository, DecksRepository
from clashlite.presentation.cli.config import StatusMode, load_config
from clashlite.presentation.cli.render import debug_enabled, render_bullet_lines, render_status
from clashlite.services import BattleService
from clashlite.services.battle_service import (
    BattleEvent,
    BattleResolvedEvent,
    BattleStartedEvent,
    CardPlayedEvent,
    SpellCastEvent,
    TowerDamagedEvent,
    TroopAttackEvent,
    TroopDefeatedEvent,
    TroopMovedEvent,
    TurnStartedEvent,
    TurnStatusEvent,
)

PLAYER_ONE_NAME = "Player1"
PLAYER_TWO_NAME = "AI"
_MAX_RANDOM_SEED = 2**31 - 1


def main(config_path: Path | None = None) -> None:
    """Run a single battle between the two starter decks."""
    config = load_config(config_path)
    seed = config["seed"]
    if seed is None:
        seed = secrets.randbelow(_MAX_RANDOM_SEED)

    battle_service = _build_battle_service()
    battle_state = battle_service.create_battle(PLAYER_ONE_NAME, PLAYER_TWO_NAME, RNG(seed))
    status_mode = config["status_mode"]
    debug = debug_enabled()

    _render_events(battle_service.start_battle(battle_state), status_mode=status_mode, debug=debug)
    print(f"Battle seed: {seed}")
    while not battle_state.is_over:
        events = battle_service.run_turn(battle_state)
        if status_mode == "final" and battle_state.is_over:
            render_status(battle_service.get_status_views(battle_state))
        _render_events(events, status_mode=status_mode, debug=debug)


def _build_battle_service() -> BattleService:
    """Construct the BattleService with concrete repositories."""
    cards_repo = CardsRepository()
    decks_repo = DecksRepository(cards_repo=cards_repo)
    return BattleService(cards_repo=cards_repo, decks_repo=decks_repo)


def _render_events(events: Sequence[BattleEvent], *, status_mode: StatusMode, debug: bool) -> None:
    every_turn = status_mode == "every_turn"
    pending: List[str] = []
    for event in events:
        if isinstance(event, BattleStartedEvent):
            print(f"Game started between {event.player_one_name} and {event.player_two_name}")
            if debug:
                print(f"[{event.battle_id}]")
        elif isinstance(event, TurnStartedEvent):
            if every_turn:
                print(f"Turn {event.turn}")
        elif isinstance(event, TurnStatusEvent):
            if every_turn:
                render_bullet_lines(pending)
                render_status(event.statuses)
            pending = []
        elif isinstance(event, BattleResolvedEvent):
            print(_format_outcome(event))
        elif every_turn:
            line = _format_turn_event(event, debug=debug)
            if line:
                pending.append(line)


def _format_turn_event(event: BattleEvent, *, debug: bool) -> str | None:
    if isinstance(event, CardPlayedEvent):
        line = f"{event.player_name} plays {event.card_name} ({event.elixir_cost} elixir, {event.elixir_remaining} left)"
        if debug and event.troop_id:
            line += f" [{event.troop_id} @ {event.position}]"
        return line
    if isinstance(event, SpellCastEvent):
        return (
            f"{event.spell_name} deals {event.area_damage} to {event.troops_hit} troop(s), "
            f"defeating {event.troops_defeated}"
        )
    if isinstance(event, TroopDefeatedEvent):
        return f"{event.owner_name}'s {event.troop_name} is defeated"
    if isinstance(event, TowerDamagedEvent):
        return (
            f"{event.attacker_name} hits {event.tower_owner_name}'s tower for {event.damage} "
            f"(Tower HP {event.tower_health})"
        )
    if not debug:
        return None
    if isinstance(event, TroopAttackEvent):
        return (
            f"{event.attacker_name} [{event.attacker_id}] hits {event.target_name} [{event.target_id}] "
            f"for {event.damage} (HP {event.target_hp})"
        )
    if isinstance(event, TroopMovedEvent):
        return f"{event.owner_name}'s {event.troop_name} [{event.troop_id}] advances to lane {event.position}"
    return None


def _format_outcome(event: BattleResolvedEvent) -> str:
    if event.winner_name is None:
        return "Game ended in a draw."
    return f"{event.winner_name} wins!"
