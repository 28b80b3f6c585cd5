"""Database repository helpers."""

from repositories.matches import count_matches, create_match, list_match_records
from repositories.players import create_player, find_player_by_name, list_players
from repositories.schema import ensure_schema

__all__ = [
    "count_matches",
    "create_match",
    "create_player",
    "ensure_schema",
    "find_player_by_name",
    "list_match_records",
    "list_players",
]
