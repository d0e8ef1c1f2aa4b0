"""Domain definition exports."""

from .card_def import CardDef
from .deck_def import DeckDef

__all__ = [
    "CardDef",
    "DeckDef",
]
