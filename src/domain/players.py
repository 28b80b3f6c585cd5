"""Player name helpers shared by the player store and scripts."""

from __future__ import annotations

from domain.errors import InvalidPlayerName


def normalize_player_name(name: str) -> str:
    normalized = name.strip()
    if not normalized:
        raise InvalidPlayerName("Player name cannot be empty")
    return normalized


def player_initials(name: str) -> str:
    """First letter of the first and last words, upper-cased."""
    parts = name.split()
    if not parts:
        return ""
    first = parts[0][0]
    last = parts[-1][0] if len(parts) > 1 else ""
    return (first + last).upper()


__all__ = ["normalize_player_name", "player_initials"]
