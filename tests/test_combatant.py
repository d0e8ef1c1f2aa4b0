from __future__ import annotations

import pytest

from tests.helpers.battle_builders import (
    ARCHER,
    FIREBALL,
    GIANT,
    KNIGHT,
    fixed_troop_id,
    make_combatant,
    make_troop,
)


@pytest.mark.parametrize(("start", "expected"), [(0, 1), (5, 6), (9, 10), (10, 10)])
def test_regenerate_elixir_is_capped(start: int, expected: int) -> None:
    combatant = make_combatant("player_one", elixir=start)
    combatant.regenerate_elixir()
    assert combatant.elixir == expected


def test_play_card_picks_first_affordable_in_hand_order() -> None:
    player = make_combatant("player_one", hand=[GIANT, KNIGHT, ARCHER], deck=[FIREBALL], elixir=4)
    opponent = make_combatant("player_two")

    result = player.play_card(opponent, fixed_troop_id)

    assert result is not None
    assert result.card is KNIGHT
    assert result.drawn is FIREBALL
    assert player.elixir == 1
    assert player.hand == [GIANT, ARCHER, FIREBALL]
    assert player.deck == []


def test_playing_troop_deploys_at_owner_edge() -> None:
    for side, edge in (("player_one", 0), ("player_two", 9)):
        player = make_combatant(side, hand=[KNIGHT, ARCHER], deck=[GIANT, FIREBALL])
        opponent = make_combatant("player_two" if side == "player_one" else "player_one")
        hand_before = len(player.hand)
        deck_before = len(player.deck)

        result = player.play_card(opponent, fixed_troop_id)

        assert result is not None and result.troop is not None
        assert player.troops == [result.troop]
        assert result.troop.position == edge
        assert result.troop.instance_id == "knight_deployed"
        assert len(player.hand) == hand_before
        assert len(player.deck) == deck_before - 1


def test_playing_with_empty_deck_shrinks_hand() -> None:
    player = make_combatant("player_one", hand=[ARCHER, KNIGHT])
    opponent = make_combatant("player_two")

    result = player.play_card(opponent, fixed_troop_id)

    assert result is not None
    assert result.drawn is None
    assert player.hand == [KNIGHT]


def test_each_play_creates_a_fresh_troop() -> None:
    player = make_combatant("player_one", hand=[ARCHER, ARCHER], elixir=10)
    opponent = make_combatant("player_two")

    first = player.play_card(opponent, fixed_troop_id)
    second = player.play_card(opponent, fixed_troop_id)

    assert first is not None and second is not None
    assert first.troop is not second.troop
    assert len(player.troops) == 2


def test_no_affordable_card_is_a_no_op() -> None:
    player = make_combatant("player_one", hand=[GIANT, KNIGHT], deck=[ARCHER], elixir=2)
    opponent = make_combatant("player_two")

    assert player.play_card(opponent, fixed_troop_id) is None
    assert player.elixir == 2
    assert player.hand == [GIANT, KNIGHT]
    assert player.deck == [ARCHER]
    assert player.troops == []


def test_empty_hand_is_a_no_op() -> None:
    player = make_combatant("player_one", elixir=10)
    opponent = make_combatant("player_two")

    assert player.play_card(opponent, fixed_troop_id) is None
    assert player.elixir == 10


def test_playing_spell_hits_opponent_troops_only() -> None:
    own_troop = make_troop(ARCHER, 2, hit_points=8)
    weak = make_troop(ARCHER, 7, hit_points=8)
    sturdy = make_troop(KNIGHT, 8, hit_points=15)
    player = make_combatant("player_one", hand=[FIREBALL], troops=[own_troop], elixir=4)
    opponent = make_combatant("player_two", troops=[weak, sturdy])

    result = player.play_card(opponent, fixed_troop_id)

    assert result is not None and result.spell is not None
    assert result.troop is None
    assert player.elixir == 0
    assert player.troops == [own_troop]
    assert own_troop.hit_points == 8
    assert opponent.troops == [sturdy]
    assert sturdy.hit_points == 5


def test_elixir_never_negative_across_plays() -> None:
    player = make_combatant("player_one", hand=[ARCHER, KNIGHT, GIANT, FIREBALL], elixir=5)
    opponent = make_combatant("player_two")

    for _ in range(6):
        player.play_card(opponent, fixed_troop_id)
        assert 0 <= player.elixir <= player.max_elixir
        player.regenerate_elixir()


@pytest.mark.parametrize(("tower_health", "defeated"), [(1, False), (0, True), (-7, True)])
def test_is_defeated(tower_health: int, defeated: bool) -> None:
    assert make_combatant("player_two", tower_health=tower_health).is_defeated is defeated


def test_remove_dead_troops_returns_removed() -> None:
    alive = make_troop(KNIGHT, 1)
    dead = make_troop(ARCHER, 2, hit_points=-1)
    player = make_combatant("player_one", troops=[alive, dead])

    removed = player.remove_dead_troops()

    assert removed == [dead]
    assert player.troops == [alive]
    assert player.remove_dead_troops() == []


def test_troops_at_target_edge_depend_on_side() -> None:
    at_nine = make_troop(GIANT, 9)
    at_zero = make_troop(GIANT, 0)

    player_one = make_combatant("player_one", troops=[at_nine, at_zero])
    player_two = make_combatant("player_two", troops=[at_nine, at_zero])

    assert player_one.troops_at_target_edge() == [at_nine]
    assert player_two.troops_at_target_edge() == [at_zero]
