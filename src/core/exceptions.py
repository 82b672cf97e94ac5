"""
Custom exceptions raised by the service layer.

Every exception carries an ErrorKind, which the API layer translates into an HTTP status code.
"""

from src.core.shared_types import ErrorKind


class GameLibraryError(Exception):
    """Top-level exception for anything the game library refuses to do."""

    # Set by every subclass, the API layer maps it to a status code.
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidQueryError(GameLibraryError):
    """A required query value is missing or empty."""

    kind = ErrorKind.INVALID_QUERY


class InvalidIdError(GameLibraryError):
    """A game id is not a non-negative integer."""

    kind = ErrorKind.INVALID_ID


class GameNotFoundError(GameLibraryError):
    """No game at the given position, or no game matching the given filter."""

    kind = ErrorKind.NOT_FOUND
