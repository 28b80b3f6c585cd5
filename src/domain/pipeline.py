"""Snapshot loading, standings build, and match recording over a session factory."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.orm import Session

from domain.common import MatchRecord, Player, StandingsRow, TiePolicy
from domain.config import StandingsConfig
from domain.errors import MatchRecordError
from domain.standings import aggregate, filter_matches
from domain.submission import MatchSubmission, to_new_match
from repositories import create_match, list_match_records, list_players


@dataclass(frozen=True)
class Snapshot:
    """Players and matches read together at one point in time."""

    players: tuple[Player, ...]
    matches: tuple[MatchRecord, ...]


@dataclass(frozen=True)
class StandingsSummary:
    """Outcome of one standings build."""

    config_name: str
    tie_policy: str
    players: int
    loaded_matches: int
    counted_matches: int
    rows: list[StandingsRow]


def load_snapshot(session: Session) -> Snapshot:
    """Read the full player and match lists inside one session.

    Both lists are materialized before returning, so an error part-way
    through propagates instead of yielding a truncated match list.
    """
    players = tuple(list_players(session))
    matches = tuple(list_match_records(session))
    return Snapshot(players=players, matches=matches)


def build_standings(
    *,
    session_factory,
    config: StandingsConfig | None = None,
    echo: Callable[[str], None] | None = None,
) -> StandingsSummary:
    """Load a fresh snapshot and compute ranked standings from it."""
    tie_policy = TiePolicy.DRAW if config is None else config.tie_policy
    config_name = "default" if config is None else config.name

    with session_factory() as session:
        snapshot = load_snapshot(session)

    matches = filter_matches(snapshot.matches, tie_policy=tie_policy)
    rows = aggregate(snapshot.players, matches, tie_policy=tie_policy)

    if echo is not None:
        echo(
            f"config={config_name} "
            f"tie_policy={tie_policy.value} "
            f"players={len(snapshot.players)} "
            f"loaded_matches={len(snapshot.matches)} "
            f"counted_matches={len(matches)}"
        )

    return StandingsSummary(
        config_name=config_name,
        tie_policy=tie_policy.value,
        players=len(snapshot.players),
        loaded_matches=len(snapshot.matches),
        counted_matches=len(matches),
        rows=rows,
    )


def record_match(
    *,
    session_factory,
    submission: MatchSubmission,
    echo: Callable[[str], None] | None = None,
) -> str:
    """Validate and persist one match with its four participants atomically.

    Raises MatchSubmissionError before touching the database when validation
    fails, and MatchRecordError when the write fails. A failed write leaves
    neither the match nor any participant behind.
    """
    new_match = to_new_match(submission)

    with session_factory() as session:
        try:
            match_id = create_match(session, new_match)
            session.commit()
        except Exception as exc:
            session.rollback()
            raise MatchRecordError(f"Could not record match: {exc}") from exc

    if echo is not None:
        echo(
            f"recorded match_id={match_id} "
            f"played_at={new_match.played_at.isoformat()} "
            f"score={new_match.side_a_games}-{new_match.side_b_games}"
        )
    return match_id


__all__ = [
    "Snapshot",
    "StandingsSummary",
    "build_standings",
    "load_snapshot",
    "record_match",
]
