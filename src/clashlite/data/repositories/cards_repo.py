"""Cards repository."""
from __future__ import annotations

from typing import Dict

from clashlite.data.errors import DataValidationError
from clashlite.data.repositories.base import RepositoryBase
from clashlite.domain.defs import CardDef

_TROOP_FIELDS = {"name", "kind", "elixir_cost", "hit_points", "damage", "range", "speed"}
_SPELL_FIELDS = {"name", "kind", "elixir_cost", "area_damage"}


class CardsRepository(RepositoryBase[CardDef]):
    """Loads and validates troop and spell card definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("cards.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, CardDef]:
        cards: Dict[str, CardDef] = {}
        for raw_id, payload in raw.items():
            card_data = self._require_mapping(payload, f"card '{raw_id}'")
            kind = card_data.get("kind")
            if kind == "troop":
                cards[raw_id] = self._build_troop(raw_id, card_data)
            elif kind == "spell":
                cards[raw_id] = self._build_spell(raw_id, card_data)
            else:
                raise DataValidationError(f"card '{raw_id}' kind must be 'troop' or 'spell', got {kind!r}.")
        return cards

    def _build_troop(self, card_id: str, data: dict[str, object]) -> CardDef:
        context = f"troop card '{card_id}'"
        self._assert_exact_fields(data, _TROOP_FIELDS, context)
        hit_points = self._require_non_negative_int(data["hit_points"], f"{context} hit_points")
        if hit_points == 0:
            raise DataValidationError(f"{context} hit_points must be positive.")
        return CardDef(
            id=card_id,
            name=self._require_str(data["name"], f"{context} name"),
            kind="troop",
            elixir_cost=self._require_non_negative_int(data["elixir_cost"], f"{context} elixir_cost"),
            hit_points=hit_points,
            damage=self._require_non_negative_int(data["damage"], f"{context} damage"),
            range=self._require_non_negative_int(data["range"], f"{context} range"),
            speed=self._require_non_negative_int(data["speed"], f"{context} speed"),
        )

    def _build_spell(self, card_id: str, data: dict[str, object]) -> CardDef:
        context = f"spell card '{card_id}'"
        self._assert_exact_fields(data, _SPELL_FIELDS, context)
        return CardDef(
            id=card_id,
            name=self._require_str(data["name"], f"{context} name"),
            kind="spell",
            elixir_cost=self._require_non_negative_int(data["elixir_cost"], f"{context} elixir_cost"),
            area_damage=self._require_non_negative_int(data["area_damage"], f"{context} area_damage"),
        )
