"""Service layer exports."""

from .errors import FactoryError
from .battle_service import BattleService

__all__ = [
    "FactoryError",
    "BattleService",
]
