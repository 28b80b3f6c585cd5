"""Tie-break ordering for standings rows."""

from __future__ import annotations

from collections.abc import Iterable

from domain.common import StandingsRow


def standings_sort_key(row: StandingsRow) -> tuple[int, int, int]:
    """Ascending sort key: most wins, then best diff, then most points scored."""
    return (-row.wins, -row.diff, -row.points_for)


def rank_rows(rows: Iterable[StandingsRow]) -> list[StandingsRow]:
    # sorted() is stable, so fully tied rows keep their incoming order.
    return sorted(rows, key=standings_sort_key)


def assign_positions(rows: list[StandingsRow]) -> list[tuple[int, StandingsRow]]:
    """Attach competition ranks (1, 2, 2, 4) to already ordered rows."""
    positioned: list[tuple[int, StandingsRow]] = []
    previous_key: tuple[int, int, int] | None = None
    position = 0
    for index, row in enumerate(rows, start=1):
        key = standings_sort_key(row)
        if key != previous_key:
            position = index
            previous_key = key
        positioned.append((position, row))
    return positioned


__all__ = ["assign_positions", "rank_rows", "standings_sort_key"]
