from __future__ import annotations

import pytest

from clashlite.domain.cards import Troop, cast_spell, find_target, perform_troop_action, validate_position
from tests.helpers.battle_builders import ARCHER, FIREBALL, GIANT, KNIGHT, make_troop


def test_troop_from_def_starts_undeployed_at_full_health() -> None:
    troop = Troop.from_def(KNIGHT, "knight_1")

    assert troop.position == -1
    assert not troop.is_deployed
    assert troop.hit_points == troop.max_hit_points == 30
    assert troop.is_alive


def test_troop_from_def_rejects_spell_cards() -> None:
    with pytest.raises(ValueError):
        Troop.from_def(FIREBALL, "fireball_1")


def test_take_damage_has_no_floor() -> None:
    troop = make_troop(ARCHER, 2)
    troop.take_damage(20)

    assert troop.hit_points == -5
    assert not troop.is_alive


@pytest.mark.parametrize("position", [-2, 10, 42])
def test_validate_position_rejects_off_lane_values(position: int) -> None:
    with pytest.raises(ValueError):
        validate_position(position)


def test_deploy_rejects_off_lane_position() -> None:
    troop = Troop.from_def(KNIGHT, "knight_1")
    with pytest.raises(ValueError):
        troop.deploy(10)
    assert troop.position == -1


def test_attack_enemy_in_range_without_moving() -> None:
    attacker = make_troop(KNIGHT, 3)
    enemy = make_troop(KNIGHT, 4)
    enemies = [enemy]

    result = perform_troop_action(attacker, enemies, advances_right=True)

    assert result.action == "attack"
    assert result.target is enemy
    assert enemy.hit_points == 25
    assert enemy.position == 4
    assert attacker.position == 3
    assert enemies == [enemy]


def test_advance_one_step_when_no_enemy_in_range() -> None:
    right = make_troop(KNIGHT, 3)
    left = make_troop(KNIGHT, 5)
    far_enemy = make_troop(GIANT, 8)

    assert perform_troop_action(right, [far_enemy], advances_right=True).action == "move"
    assert perform_troop_action(left, [], advances_right=False).action == "move"
    assert right.position == 4
    assert left.position == 4
    assert far_enemy.hit_points == 50


def test_movement_is_clamped_at_tower_edges() -> None:
    at_right_edge = make_troop(GIANT, 9)
    at_left_edge = make_troop(GIANT, 0)

    assert perform_troop_action(at_right_edge, [], advances_right=True).action == "hold"
    assert perform_troop_action(at_left_edge, [], advances_right=False).action == "hold"
    assert at_right_edge.position == 9
    assert at_left_edge.position == 0


def test_speed_does_not_change_step_size() -> None:
    fast = make_troop(ARCHER, 1)
    slow = make_troop(GIANT, 1)

    perform_troop_action(fast, [], advances_right=True)
    perform_troop_action(slow, [], advances_right=True)

    assert fast.position == slow.position == 2


def test_closest_enemy_is_targeted() -> None:
    archer = make_troop(ARCHER, 4)
    farther = make_troop(KNIGHT, 7, instance_id="far")
    closer = make_troop(KNIGHT, 5, instance_id="near")

    assert find_target(archer, [farther, closer]) is closer


def test_equal_distance_prefers_earliest_deployed_enemy() -> None:
    knight = make_troop(KNIGHT, 5)
    deployed_first = make_troop(ARCHER, 6, instance_id="first")
    deployed_second = make_troop(ARCHER, 4, instance_id="second")

    assert find_target(knight, [deployed_first, deployed_second]) is deployed_first
    assert find_target(knight, [deployed_second, deployed_first]) is deployed_second


def test_killed_target_is_removed_immediately() -> None:
    attacker = make_troop(KNIGHT, 4)
    victim = make_troop(ARCHER, 5, hit_points=3)
    bystander = make_troop(ARCHER, 9)
    enemies = [victim, bystander]

    result = perform_troop_action(attacker, enemies, advances_right=True)

    assert result.target_defeated
    assert victim.hit_points == -2
    assert enemies == [bystander]


def test_undeployed_or_dead_troop_is_idle() -> None:
    undeployed = Troop.from_def(KNIGHT, "knight_1")
    dead = make_troop(KNIGHT, 2, hit_points=0)
    enemy = make_troop(KNIGHT, 3)

    assert perform_troop_action(undeployed, [enemy], advances_right=True).action == "idle"
    assert perform_troop_action(dead, [enemy], advances_right=True).action == "idle"
    assert enemy.hit_points == 30
    assert dead.position == 2


def test_spell_damages_all_enemies_and_removes_the_dead() -> None:
    weak = make_troop(ARCHER, 3, hit_points=8)
    sturdy = make_troop(ARCHER, 6, hit_points=15)
    enemies = [weak, sturdy]

    result = cast_spell(FIREBALL, enemies)

    assert enemies == [sturdy]
    assert sturdy.hit_points == 5
    assert result.troops_hit == [weak, sturdy]
    assert result.troops_defeated == [weak]


def test_spell_on_empty_board_is_a_no_op() -> None:
    enemies: list[Troop] = []
    result = cast_spell(FIREBALL, enemies)

    assert enemies == []
    assert result.troops_hit == []


def test_cast_spell_rejects_troop_cards() -> None:
    with pytest.raises(ValueError):
        cast_spell(KNIGHT, [])
