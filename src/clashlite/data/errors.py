"""Exceptions raised while loading card and deck definitions."""


class DataError(Exception):
    """Base exception for the data layer."""


class DataLoadError(DataError):
    """Raised when a definition file is missing, unreadable or not valid JSON."""


class DataValidationError(DataError):
    """Raised when definition content does not match the expected schema."""


class DataReferenceError(DataError):
    """Raised when a deck references a card that is not defined."""
