"""Decks repository with card reference validation."""
from __future__ import annotations

from typing import Dict

from clashlite.data.errors import DataReferenceError, DataValidationError
from clashlite.data.repositories.base import RepositoryBase
from clashlite.data.repositories.cards_repo import CardsRepository
from clashlite.domain.defs import DeckDef


class DecksRepository(RepositoryBase[DeckDef]):
    """Loads decks and ensures every listed card exists."""

    def __init__(self, cards_repo: CardsRepository | None = None, base_path=None) -> None:
        super().__init__("decks.json", base_path)
        self._cards_repo = cards_repo or CardsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, DeckDef]:
        card_ids = {card.id for card in self._cards_repo.all()}

        decks: Dict[str, DeckDef] = {}
        for raw_id, payload in raw.items():
            deck_data = self._require_mapping(payload, f"deck '{raw_id}'")
            self._assert_exact_fields(deck_data, {"name", "card_ids"}, f"deck '{raw_id}'")

            name = self._require_str(deck_data["name"], f"deck '{raw_id}' name")
            deck_card_ids = self._require_str_list(deck_data["card_ids"], f"deck '{raw_id}' card_ids")
            if not deck_card_ids:
                raise DataValidationError(f"deck '{raw_id}' must list at least one card.")
            for card_id in deck_card_ids:
                if card_id not in card_ids:
                    raise DataReferenceError(f"deck '{raw_id}' references missing card '{card_id}'.")

            decks[raw_id] = DeckDef(id=raw_id, name=name, card_ids=tuple(deck_card_ids))
        return decks
