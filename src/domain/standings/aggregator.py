"""Standings aggregation over a full players + matches snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from domain.common import (
    MatchRecord,
    Player,
    Side,
    StandingsRow,
    TeamMatchResult,
    TiePolicy,
)
from domain.standings.filter import filter_matches
from domain.standings.ordering import rank_rows


class StandingsAggregator:
    """Single-pass accumulator; create one per aggregation call."""

    def __init__(self, players: Iterable[Player], *, tie_policy: TiePolicy = TiePolicy.DRAW) -> None:
        self.tie_policy = tie_policy
        self._rows: dict[str, StandingsRow] = {}
        for player in players:
            if player.id not in self._rows:
                self._rows[player.id] = StandingsRow(player_id=player.id, name=player.name)

    def tracked_player_count(self) -> int:
        return len(self._rows)

    def _apply(
        self,
        player_ids: Sequence[str],
        *,
        points_for: int,
        points_against: int,
        outcome: str,
    ) -> None:
        for player_id in player_ids:
            row = self._rows.get(player_id)
            if row is None:
                # Stale reference to a player outside the snapshot.
                continue
            row.played += 1
            row.points_for += points_for
            row.points_against += points_against
            if outcome == "win":
                row.wins += 1
            elif outcome == "loss":
                row.losses += 1
            else:
                row.draws += 1

    def process_match(self, match: TeamMatchResult) -> None:
        if match.is_tie and self.tie_policy == TiePolicy.EXCLUDE:
            return

        winner = match.winner
        if winner is None:
            side_a_outcome = side_b_outcome = "draw"
        elif winner == Side.A:
            side_a_outcome, side_b_outcome = "win", "loss"
        else:
            side_a_outcome, side_b_outcome = "loss", "win"

        self._apply(
            match.side_a,
            points_for=match.side_a_games,
            points_against=match.side_b_games,
            outcome=side_a_outcome,
        )
        self._apply(
            match.side_b,
            points_for=match.side_b_games,
            points_against=match.side_a_games,
            outcome=side_b_outcome,
        )

    def rows(self) -> list[StandingsRow]:
        """Finalized rows in tie-break order."""
        for row in self._rows.values():
            row.diff = row.points_for - row.points_against
            row.ratio = 0.0 if row.played == 0 else row.wins / row.played
        return rank_rows(self._rows.values())


def aggregate(
    players: Iterable[Player],
    matches: Iterable[TeamMatchResult],
    *,
    tie_policy: TiePolicy = TiePolicy.DRAW,
) -> list[StandingsRow]:
    """Compute ranked standings rows from already-filtered matches."""
    aggregator = StandingsAggregator(players, tie_policy=tie_policy)
    for match in matches:
        aggregator.process_match(match)
    return aggregator.rows()


def compute_standings(
    players: Iterable[Player],
    records: Iterable[MatchRecord],
    *,
    tie_policy: TiePolicy = TiePolicy.DRAW,
) -> list[StandingsRow]:
    """Filter raw match records, then aggregate them."""
    matches = filter_matches(records, tie_policy=tie_policy)
    return aggregate(players, matches, tie_policy=tie_policy)


__all__ = ["StandingsAggregator", "aggregate", "compute_standings"]
