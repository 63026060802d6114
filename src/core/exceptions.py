"""
Custom exceptions used across layers.

Illegal moves are NOT exceptions: the rules engine rejects them silently and reports a reason.
These are reserved for malformed input and broken state.
"""


class GameError(Exception):
    """Top-level exception. Catch this one if you do not care which layer failed."""


class GameStateError(GameError):
    """The stored game cannot be turned into a valid Game (unknown status, etc.)"""


class InvalidLayoutError(GameError):
    """Board layout / state notation could not be parsed."""


class InvalidRequestError(GameError):
    """Request payload failed validation at the API boundary."""


class RepositoryError(GameError):
    """Persistence layer could not find or store a game."""
