"""Schema creation for the standings tables."""

from __future__ import annotations

from sqlalchemy.engine import Engine

from models import Base, Match, MatchParticipant, Player


def ensure_schema(engine: Engine) -> None:
    """Create players, matches, and match_participants if they do not exist."""
    Base.metadata.create_all(
        bind=engine,
        tables=[Player.__table__, Match.__table__, MatchParticipant.__table__],
    )
