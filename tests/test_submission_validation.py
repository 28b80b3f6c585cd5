"""Tests for match submission validation."""

from __future__ import annotations

from dataclasses import replace
from datetime import date

import pytest

from domain.common import Side, Slot
from domain.errors import MatchSubmissionError
from domain.submission import (
    DATE_REQUIRED,
    DUPLICATE_PLAYER,
    INVALID_DATE,
    MAX_SCORE,
    PLAYERS_REQUIRED,
    SCORES_NEGATIVE,
    SCORES_NOT_INTEGERS,
    SCORES_REQUIRED,
    SCORES_TOO_LARGE,
    TIE_NOT_ALLOWED,
    MatchSubmission,
    parse_score,
    to_new_match,
    validate_match_submission,
)

VALID = MatchSubmission(
    played_at="2024-01-01",
    side_a_score="3",
    side_b_score="1",
    side_a_left="A",
    side_a_right="B",
    side_b_left="C",
    side_b_right="D",
)


def test_valid_submission_has_no_error() -> None:
    assert validate_match_submission(VALID) is None


def test_missing_date_is_reported_first() -> None:
    assert validate_match_submission(MatchSubmission()) == DATE_REQUIRED
    assert validate_match_submission(replace(VALID, played_at="")) == DATE_REQUIRED


def test_missing_score_is_reported() -> None:
    assert validate_match_submission(replace(VALID, side_a_score="")) == SCORES_REQUIRED
    assert validate_match_submission(replace(VALID, side_b_score=None)) == SCORES_REQUIRED


@pytest.mark.parametrize(
    "score",
    ["abc", "2.5", "inf", "nan", "3 games", "1_0", "\u0661\u0662", "1e400"],
)
def test_non_integer_scores_are_rejected(score: str) -> None:
    assert validate_match_submission(replace(VALID, side_a_score=score)) == SCORES_NOT_INTEGERS


def test_negative_score_is_rejected() -> None:
    assert validate_match_submission(replace(VALID, side_b_score="-1")) == SCORES_NEGATIVE


def test_tie_is_rejected() -> None:
    assert validate_match_submission(replace(VALID, side_a_score="3", side_b_score="3")) == TIE_NOT_ALLOWED


def test_tie_is_reported_before_missing_players() -> None:
    submission = MatchSubmission(played_at="2024-01-01", side_a_score="3", side_b_score="3")
    assert validate_match_submission(submission) == TIE_NOT_ALLOWED


def test_empty_slot_is_rejected() -> None:
    assert validate_match_submission(replace(VALID, side_b_right="")) == PLAYERS_REQUIRED


def test_duplicate_player_is_rejected() -> None:
    submission = replace(VALID, side_a_left="A", side_a_right="B", side_b_left="A", side_b_right="C")
    assert validate_match_submission(submission) == DUPLICATE_PLAYER


def test_duplicate_within_one_side_is_rejected() -> None:
    assert validate_match_submission(replace(VALID, side_a_right="A")) == DUPLICATE_PLAYER


def test_parse_score_accepts_integral_text_and_ints() -> None:
    assert parse_score("7") == 7
    assert parse_score(" 7 ") == 7
    assert parse_score("7.0") == 7
    assert parse_score(4) == 4
    assert parse_score(True) is None
    assert parse_score("1.5") is None


def test_to_new_match_returns_typed_values() -> None:
    new_match = to_new_match(VALID)

    assert new_match.played_at == date(2024, 1, 1)
    assert (new_match.side_a_games, new_match.side_b_games) == (3, 1)
    assert new_match.side_a == ("A", "B")
    assert new_match.side_b == ("C", "D")
    assert new_match.participant_rows() == [
        ("A", Side.A, Slot.LEFT),
        ("B", Side.A, Slot.RIGHT),
        ("C", Side.B, Slot.LEFT),
        ("D", Side.B, Slot.RIGHT),
    ]


def test_to_new_match_raises_validation_message() -> None:
    with pytest.raises(MatchSubmissionError) as exc_info:
        to_new_match(replace(VALID, side_b_score="3"))
    assert exc_info.value.message == TIE_NOT_ALLOWED


def test_to_new_match_rejects_unparseable_date() -> None:
    with pytest.raises(MatchSubmissionError, match="ISO date"):
        to_new_match(replace(VALID, played_at="01/02/2024"))
    assert INVALID_DATE.startswith("Match date")


def test_score_above_column_range_is_rejected() -> None:
    assert validate_match_submission(replace(VALID, side_a_score="9" * 30)) == SCORES_TOO_LARGE
    assert validate_match_submission(replace(VALID, side_b_score=str(MAX_SCORE + 1))) == SCORES_TOO_LARGE


def test_score_at_column_limit_is_accepted() -> None:
    assert validate_match_submission(replace(VALID, side_a_score=str(MAX_SCORE))) is None


def test_parse_score_accepts_exponent_notation() -> None:
    assert parse_score("1e2") == 100
    assert parse_score("+5") == 5


def test_player_ids_are_compared_without_surrounding_whitespace() -> None:
    assert validate_match_submission(replace(VALID, side_b_left=" A")) == DUPLICATE_PLAYER
    assert validate_match_submission(replace(VALID, side_b_right=" ")) == PLAYERS_REQUIRED


def test_to_new_match_strips_player_ids() -> None:
    new_match = to_new_match(replace(VALID, side_a_left=" A ", side_b_right="D\t"))

    assert new_match.side_a == ("A", "B")
    assert new_match.side_b == ("C", "D")
