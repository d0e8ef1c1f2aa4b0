"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a deck or combatant cannot be created."""
