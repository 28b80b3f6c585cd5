"""Shared types for players, matches, and standings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Side(str, Enum):
    """One of the two teams in a match."""

    A = "A"
    B = "B"


class TiePolicy(str, Enum):
    """How equal-score matches are treated when building standings."""

    DRAW = "draw"
    EXCLUDE = "exclude"


class Slot(str, Enum):
    """Court position inside a side. Carries no scoring semantics."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class Player:
    id: str
    name: str


@dataclass(frozen=True)
class MatchParticipant:
    player_id: str
    side: Side
    slot: Slot | None = None


@dataclass(frozen=True)
class MatchRecord:
    """Match as returned by the match store, not yet validated."""

    side_a_games: int | None
    side_b_games: int | None
    participants: tuple[MatchParticipant, ...] = ()
    match_id: str | None = None
    played_at: date | None = None

    def player_ids(self, side: Side) -> list[str]:
        return [p.player_id for p in self.participants if p.side == side]


@dataclass(frozen=True)
class TeamMatchResult:
    """Canonical well-formed match consumed by the standings aggregator."""

    side_a: tuple[str, str]
    side_b: tuple[str, str]
    side_a_games: int
    side_b_games: int
    match_id: str | None = None
    played_at: date | None = None

    @property
    def is_tie(self) -> bool:
        return self.side_a_games == self.side_b_games

    @property
    def winner(self) -> Side | None:
        if self.side_a_games > self.side_b_games:
            return Side.A
        if self.side_b_games > self.side_a_games:
            return Side.B
        return None


@dataclass
class StandingsRow:
    """Per-player aggregate used for ranking. Built fresh on every call."""

    player_id: str
    name: str
    played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0
    points_for: int = 0
    points_against: int = 0
    diff: int = 0
    ratio: float = 0.0


__all__ = [
    "MatchParticipant",
    "MatchRecord",
    "Player",
    "Side",
    "Slot",
    "StandingsRow",
    "TeamMatchResult",
    "TiePolicy",
]
