"""Card definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from clashlite.core.types import CardKind


@dataclass(frozen=True, slots=True)
class CardDef:
    """Immutable card template shared by every deck that lists it.

    Troops use the combat stats; spells only use ``area_damage``.
    """

    id: str
    name: str
    kind: CardKind
    elixir_cost: int
    hit_points: int = 0
    damage: int = 0
    range: int = 0
    speed: int = 0  # stored only; troops always step one lane per turn
    area_damage: int = 0

    @property
    def is_troop(self) -> bool:
        return self.kind == "troop"

    @property
    def is_spell(self) -> bool:
        return self.kind == "spell"
