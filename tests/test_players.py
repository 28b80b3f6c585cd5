"""Tests for player name helpers."""

from __future__ import annotations

import pytest

from domain.errors import InvalidPlayerName
from domain.players import normalize_player_name, player_initials


def test_normalize_strips_whitespace() -> None:
    assert normalize_player_name("  Jean Dupont ") == "Jean Dupont"


def test_normalize_rejects_blank_names() -> None:
    with pytest.raises(InvalidPlayerName):
        normalize_player_name(" \t ")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("alice", "A"),
        ("Jean Dupont", "JD"),
        ("marie  claire de la tour", "MT"),
        ("", ""),
    ],
)
def test_player_initials(name: str, expected: str) -> None:
    assert player_initials(name) == expected
