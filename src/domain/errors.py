"""Domain exceptions raised by stores and the match recording pipeline."""

from __future__ import annotations


class StandingsError(Exception):
    """Base class for all domain errors."""


class InvalidPlayerName(StandingsError, ValueError):
    """Player name is empty once surrounding whitespace is removed."""


class DuplicatePlayerError(StandingsError, ValueError):
    """A player with the same name (ignoring case) already exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A player named '{name}' already exists")


class MatchSubmissionError(StandingsError, ValueError):
    """Submitted match failed validation; nothing was written."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MatchRecordError(StandingsError):
    """Writing a validated match failed and the transaction was rolled back."""


__all__ = [
    "DuplicatePlayerError",
    "InvalidPlayerName",
    "MatchRecordError",
    "MatchSubmissionError",
    "StandingsError",
]
