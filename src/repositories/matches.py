"""Match store backed by SQLAlchemy."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from domain.common import MatchParticipant, MatchRecord, Side, Slot
from domain.submission import NewMatch
from models import Match, MatchParticipant as MatchParticipantModel


def create_match(session: Session, new_match: NewMatch) -> str:
    """Stage a match and its four participants in the current transaction.

    The caller owns the transaction: commit writes all five rows, rollback
    writes none.
    """
    match = Match(
        played_at=new_match.played_at,
        team_a_games=new_match.side_a_games,
        team_b_games=new_match.side_b_games,
    )
    match.participants = [
        MatchParticipantModel(player_id=player_id, team=side.value, side=slot.value)
        for player_id, side, slot in new_match.participant_rows()
    ]
    session.add(match)
    session.flush()
    return match.id


def _to_record(match: Match) -> MatchRecord:
    participants = tuple(
        MatchParticipant(
            player_id=participant.player_id,
            side=Side(participant.team),
            slot=Slot(participant.side),
        )
        for participant in match.participants
    )
    return MatchRecord(
        side_a_games=match.team_a_games,
        side_b_games=match.team_b_games,
        participants=participants,
        match_id=match.id,
        played_at=match.played_at,
    )


def list_match_records(session: Session) -> list[MatchRecord]:
    """Fetch every match with its participants, most recent first."""
    statement = (
        select(Match)
        .options(selectinload(Match.participants))
        .order_by(Match.played_at.desc(), Match.created_at.desc(), Match.id)
    )
    return [_to_record(match) for match in session.execute(statement).scalars().all()]


def count_matches(session: Session) -> int:
    result = session.scalar(select(func.count()).select_from(Match))
    return int(result or 0)


__all__ = ["count_matches", "create_match", "list_match_records"]
