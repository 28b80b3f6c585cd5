"""Standings domain modules."""

from domain.common import (
    MatchParticipant,
    MatchRecord,
    Player,
    Side,
    Slot,
    StandingsRow,
    TeamMatchResult,
    TiePolicy,
)

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
