"""Factory for building decks of card templates."""
from __future__ import annotations

from typing import List

from clashlite.data.repositories import CardsRepository, DecksRepository
from clashlite.domain.defs import CardDef
from clashlite.services.errors import FactoryError


def create_deck(deck_id: str, cards_repo: CardsRepository, decks_repo: DecksRepository) -> List[CardDef]:
    """Return the cards of the requested deck in their listed order."""
    try:
        deck_def = decks_repo.get(deck_id)
    except KeyError as exc:
        raise FactoryError(f"Deck '{deck_id}' not found.") from exc

    cards: List[CardDef] = []
    for card_id in deck_def.card_ids:
        try:
            cards.append(cards_repo.get(card_id))
        except KeyError as exc:
            raise FactoryError(f"Card '{card_id}' in deck '{deck_id}' not found.") from exc
    return cards
