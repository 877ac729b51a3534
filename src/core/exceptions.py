"""Exceptions raised at the boundaries of the application.

The rules engine itself never raises for rejected moves (those are no-ops), so these only
cover malformed input and missing records.
"""


class GameError(Exception):
    """Top-level exception for anything going wrong in this application."""


class InvalidRequestError(GameError):
    """Request data could not be interpreted (ex. a square outside the board)."""


class InvalidPositionError(GameError):
    """A position string could not be parsed into a board."""


class GameStateError(GameError):
    """Stored game data is inconsistent (unknown status, unknown color, ...)."""


class RepositoryError(GameError):
    """Persistence layer could not deliver the requested record."""
