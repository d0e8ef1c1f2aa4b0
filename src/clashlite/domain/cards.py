"""Card behaviour: troop battle actors, troop actions and spell casts.

Card templates (``CardDef``) are immutable and shared. Playing a troop card
creates a fresh ``Troop`` that owns the mutable battle fields; it is discarded
once it dies. Behaviour dispatches on ``CardDef.kind``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Sequence

from clashlite.domain import rules
from clashlite.domain.defs import CardDef

TroopAction = Literal["attack", "move", "hold", "idle"]


def validate_position(position: int) -> int:
    """Return ``position`` or raise if it lies outside the undeployed slot and the lane."""
    if position != rules.UNDEPLOYED and not rules.LANE_MIN <= position <= rules.LANE_MAX:
        raise ValueError(f"Lane position {position} is outside the battlefield.")
    return position


@dataclass(slots=True, eq=False)
class Troop:
    """A deployed (or about to be deployed) troop on the lane."""

    instance_id: str
    card_id: str
    name: str
    max_hit_points: int
    hit_points: int
    damage: int
    range: int
    speed: int
    position: int = rules.UNDEPLOYED

    @classmethod
    def from_def(cls, card: CardDef, instance_id: str) -> Troop:
        if not card.is_troop:
            raise ValueError(f"Card '{card.id}' is not a troop card.")
        return cls(
            instance_id=instance_id,
            card_id=card.id,
            name=card.name,
            max_hit_points=card.hit_points,
            hit_points=card.hit_points,
            damage=card.damage,
            range=card.range,
            speed=card.speed,
        )

    @property
    def is_alive(self) -> bool:
        return self.hit_points > 0

    @property
    def is_deployed(self) -> bool:
        return self.position != rules.UNDEPLOYED

    def take_damage(self, amount: int) -> None:
        # No floor: hit points may go negative.
        self.hit_points -= amount

    def deploy(self, position: int) -> None:
        self.position = validate_position(position)

    def distance_to(self, other: Troop) -> int:
        return abs(other.position - self.position)


@dataclass(slots=True)
class TroopActionResult:
    """Outcome of a single troop action."""

    troop: Troop
    action: TroopAction
    target: Troop | None = None
    damage: int = 0
    target_defeated: bool = False


@dataclass(slots=True)
class SpellResult:
    """Outcome of casting a spell on an opponent's troops."""

    card: CardDef
    troops_hit: List[Troop] = field(default_factory=list)
    troops_defeated: List[Troop] = field(default_factory=list)


def find_target(troop: Troop, enemies: Sequence[Troop]) -> Troop | None:
    """Return the closest living enemy within range.

    Equal distances resolve to the earliest entry in ``enemies``, which is
    deployment order.
    """
    target: Troop | None = None
    best_distance: int | None = None
    for enemy in enemies:
        if not enemy.is_alive:
            continue
        distance = troop.distance_to(enemy)
        if distance > troop.range:
            continue
        if best_distance is None or distance < best_distance:
            target = enemy
            best_distance = distance
    return target


def perform_troop_action(troop: Troop, enemies: List[Troop], *, advances_right: bool) -> TroopActionResult:
    """Attack the closest enemy in range, otherwise step one lane toward the enemy tower.

    A target killed by the attack is removed from ``enemies`` right away.
    """
    if not troop.is_alive or not troop.is_deployed:
        return TroopActionResult(troop=troop, action="idle")

    target = find_target(troop, enemies)
    if target is not None:
        target.take_damage(troop.damage)
        defeated = not target.is_alive
        if defeated:
            enemies.remove(target)
        return TroopActionResult(
            troop=troop,
            action="attack",
            target=target,
            damage=troop.damage,
            target_defeated=defeated,
        )

    edge = rules.LANE_MAX if advances_right else rules.LANE_MIN
    if troop.position == edge:
        return TroopActionResult(troop=troop, action="hold")
    step = 1 if advances_right else -1
    troop.position = validate_position(troop.position + step)
    return TroopActionResult(troop=troop, action="move")


def cast_spell(card: CardDef, enemies: List[Troop]) -> SpellResult:
    """Apply the spell's area damage to every living enemy troop and drop the dead."""
    if not card.is_spell:
        raise ValueError(f"Card '{card.id}' is not a spell card.")

    result = SpellResult(card=card)
    for troop in list(enemies):
        if not troop.is_alive:
            continue
        troop.take_damage(card.area_damage)
        result.troops_hit.append(troop)
        if not troop.is_alive:
            result.troops_defeated.append(troop)
    for troop in result.troops_defeated:
        enemies.remove(troop)
    return result
