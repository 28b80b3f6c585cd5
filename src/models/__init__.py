"""ORM models."""

from models.base import Base
from models.match import Match, MatchParticipant
from models.player import Player

__all__ = [
    "Base",
    "Match",
    "MatchParticipant",
    "Player",
]
