"""matches and match_participants table models."""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Match(Base):
    """One completed two-versus-two match."""

    __tablename__ = "matches"
    __table_args__ = (
        CheckConstraint("team_a_games >= 0", name="ck_matches_team_a_games"),
        CheckConstraint("team_b_games >= 0", name="ck_matches_team_b_games"),
        Index("idx_matches_played_at", "played_at"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)
    played_at: Mapped[date] = mapped_column(Date, nullable=False)
    team_a_games: Mapped[int] = mapped_column(Integer, nullable=False)
    team_b_games: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )

    participants: Mapped[list["MatchParticipant"]] = relationship(
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="MatchParticipant.id",
    )


class MatchParticipant(Base):
    """Assignment of one player to one slot of a match."""

    __tablename__ = "match_participants"
    __table_args__ = (
        UniqueConstraint("match_id", "player_id", name="uq_match_participants_match_player"),
        UniqueConstraint("match_id", "team", "side", name="uq_match_participants_match_slot"),
        Index("idx_match_participants_match", "match_id"),
        Index("idx_match_participants_player", "player_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    match_id: Mapped[str] = mapped_column(ForeignKey("matches.id"), nullable=False)
    player_id: Mapped[str] = mapped_column(ForeignKey("players.id"), nullable=False)
    team: Mapped[str] = mapped_column(
        Enum("A", "B", name="match_team", native_enum=False),
        nullable=False,
    )
    side: Mapped[str] = mapped_column(
        Enum("LEFT", "RIGHT", name="match_side", native_enum=False),
        nullable=False,
    )

    match: Mapped[Match] = relationship(back_populates="participants")
