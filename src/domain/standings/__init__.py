"""Standings computation: pre-filter, aggregation, and ordering."""

from domain.standings.aggregator import StandingsAggregator, aggregate, compute_standings
from domain.standings.filter import filter_matches, to_team_match_result
from domain.standings.ordering import assign_positions, rank_rows, standings_sort_key

__all__ = [
    "StandingsAggregator",
    "aggregate",
    "assign_positions",
    "compute_standings",
    "filter_matches",
    "rank_rows",
    "standings_sort_key",
    "to_team_match_result",
]
