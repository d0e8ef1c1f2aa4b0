"""Factory helpers for runtime entities."""

from .combatant_factory import create_combatant
from .deck_factory import create_deck
from .id_factory import make_instance_id

__all__ = [
    "create_combatant",
    "create_deck",
    "make_instance_id",
]
