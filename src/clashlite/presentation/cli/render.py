"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import Iterable

from clashlite.domain.battle_models import CombatantStatusView


def debug_enabled() -> bool:
    """Return True only when CLASHLITE_DEBUG is explicitly set to '1'."""
    return os.getenv("CLASHLITE_DEBUG") == "1"


def format_status_line(view: CombatantStatusView) -> str:
    """Return the one-line tower/elixir/troop summary for a combatant."""
    return f"{view.name} Tower HP: {view.tower_health} Elixir: {view.elixir} Troops: {view.troop_count}"


def render_status(views: Iterable[CombatantStatusView]) -> None:
    """Print a status line per combatant followed by a blank separator line."""
    for view in views:
        print(format_status_line(view))
    print()


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")
