"""Repository exports."""

from .cards_repo import CardsRepository
from .decks_repo import DecksRepository

__all__ = [
    "CardsRepository",
    "DecksRepository",
]
