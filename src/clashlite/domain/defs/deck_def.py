"""Deck definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeckDef:
    """Ordered list of card ids making up a deck."""

    id: str
    name: str
    card_ids: tuple[str, ...]
