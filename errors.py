"""Errors raised inside the organizer services.

None of these escape a public Organizer operation; they are turned into a
status line where they occur.
"""

NEGATIVE = "negative"
TOO_LARGE = "too_large"


class OrganizerError(Exception):
    """Base exception for all organizer errors."""
    pass


class ConfigurationError(OrganizerError):
    """Raised when configuration values are invalid."""
    pass


class InvalidIndexError(OrganizerError):
    """Raised when a track index is outside the collection."""

    def __init__(self, index: int, reason: str):
        self.index = index
        self.reason = reason
        if reason == NEGATIVE:
            message = f"Index cannot be negative: {index}"
        else:
            message = f"Index is too large: {index}"
        super().__init__(message)


class EmptyCollectionError(OrganizerError):
    """Raised when an operation needs at least one track."""

    def __init__(self, message: str = "No tracks to play."):
        super().__init__(message)


class PlaybackInterruptedError(OrganizerError):
    """Raised when a shuffle hold is cut short."""

    def __init__(self, message: str = "Playback interrupted"):
        super().__init__(message)


class PlayerError(OrganizerError):
    """Raised when the audio backend cannot play a file."""
    pass
