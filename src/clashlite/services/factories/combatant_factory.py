"""Factory for creating combatants ready for battle."""
from __future__ import annotations

from typing import Sequence

from clashlite.core.rng import RNG
from clashlite.core.types import Side
from clashlite.domain.combatant import Combatant
from clashlite.domain.defs import CardDef


def create_combatant(name: str, side: Side, deck: Sequence[CardDef], rng: RNG) -> Combatant:
    """Shuffle a copy of ``deck`` once and deal the opening hand from its front."""
    cards = list(deck)
    rng.shuffle(cards)
    combatant = Combatant(name=name, side=side, deck=cards)
    combatant.draw_initial_hand()
    return combatant
