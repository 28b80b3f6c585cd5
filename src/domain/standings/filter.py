"""Pre-filter stage turning raw match records into well-formed results."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from domain.common import MatchRecord, Side, TeamMatchResult, TiePolicy

logger = logging.getLogger(__name__)


def to_team_match_result(record: MatchRecord) -> TeamMatchResult | None:
    """Return the typed form of ``record``, or None when it is malformed."""
    side_a = record.player_ids(Side.A)
    side_b = record.player_ids(Side.B)
    if len(side_a) != 2 or len(side_b) != 2:
        logger.debug(
            "skipping match_id=%s: side_a_slots=%d side_b_slots=%d",
            record.match_id,
            len(side_a),
            len(side_b),
        )
        return None

    if len(set(side_a) | set(side_b)) != 4:
        logger.debug("skipping match_id=%s: player occupies more than one slot", record.match_id)
        return None

    if record.side_a_games is None or record.side_b_games is None:
        logger.debug("skipping match_id=%s: missing score", record.match_id)
        return None
    side_a_games = int(record.side_a_games)
    side_b_games = int(record.side_b_games)
    if side_a_games < 0 or side_b_games < 0:
        logger.debug(
            "skipping match_id=%s: negative score %d-%d",
            record.match_id,
            side_a_games,
            side_b_games,
        )
        return None

    return TeamMatchResult(
        side_a=(side_a[0], side_a[1]),
        side_b=(side_b[0], side_b[1]),
        side_a_games=side_a_games,
        side_b_games=side_b_games,
        match_id=record.match_id,
        played_at=record.played_at,
    )


def filter_matches(
    records: Iterable[MatchRecord],
    *,
    tie_policy: TiePolicy = TiePolicy.DRAW,
) -> list[TeamMatchResult]:
    """Keep well-formed matches in input order. Never raises on bad records."""
    results: list[TeamMatchResult] = []
    for record in records:
        result = to_team_match_result(record)
        if result is None:
            continue
        if result.is_tie and tie_policy == TiePolicy.EXCLUDE:
            logger.debug("skipping match_id=%s: tied score excluded", result.match_id)
            continue
        results.append(result)
    return results


__all__ = ["filter_matches", "to_team_match_result"]
