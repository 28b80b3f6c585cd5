"""Validation of a new match before it is handed to the match store."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import cast

from domain.common import Side, Slot
from domain.errors import MatchSubmissionError

# Upper bound of the INTEGER score columns.
MAX_SCORE = 2_147_483_647

_INTEGER_TEXT = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DECIMAL_TEXT = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?", re.ASCII)

DATE_REQUIRED = "Match date is required"
SCORES_REQUIRED = "Both scores are required"
SCORES_NOT_INTEGERS = "Scores must be valid integers"
SCORES_NEGATIVE = "Scores must be >= 0"
SCORES_TOO_LARGE = f"Scores must be <= {MAX_SCORE}"
TIE_NOT_ALLOWED = "A match cannot end in a tie"
PLAYERS_REQUIRED = "All four players must be selected"
DUPLICATE_PLAYER = "A player cannot be selected more than once"
INVALID_DATE = "Match date must be an ISO date (YYYY-MM-DD)"

ScoreInput = str | int | None


@dataclass(frozen=True)
class MatchSubmission:
    """Raw match form input. Empty strings mean the field was left blank."""

    played_at: str | date | None = ""
    side_a_score: ScoreInput = ""
    side_b_score: ScoreInput = ""
    side_a_left: str | None = ""
    side_a_right: str | None = ""
    side_b_left: str | None = ""
    side_b_right: str | None = ""

    def slots(self) -> list[str | None]:
        return [self.side_a_left, self.side_a_right, self.side_b_left, self.side_b_right]


@dataclass(frozen=True)
class NewMatch:
    """Validated match ready to be written with its four participants."""

    played_at: date
    side_a_games: int
    side_b_games: int
    side_a: tuple[str, str]
    side_b: tuple[str, str]

    def participant_rows(self) -> list[tuple[str, Side, Slot]]:
        return [
            (self.side_a[0], Side.A, Slot.LEFT),
            (self.side_a[1], Side.A, Slot.RIGHT),
            (self.side_b[0], Side.B, Slot.LEFT),
            (self.side_b[1], Side.B, Slot.RIGHT),
        ]


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


def _slot_id(value: str | None) -> str:
    return "" if value is None else value.strip()


def parse_score(value: ScoreInput) -> int | None:
    """Parse a score the way a numeric form field does; None if not a finite integer."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if _INTEGER_TEXT.fullmatch(text):
        return int(text)
    if not _DECIMAL_TEXT.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number) or not number.is_integer():
        return None
    return int(number)


def validate_match_submission(submission: MatchSubmission) -> str | None:
    """Return the first failing check's message, or None when the match is acceptable."""
    if _is_blank(submission.played_at):
        return DATE_REQUIRED
    if _is_blank(submission.side_a_score) or _is_blank(submission.side_b_score):
        return SCORES_REQUIRED

    side_a_games = parse_score(submission.side_a_score)
    side_b_games = parse_score(submission.side_b_score)
    if side_a_games is None or side_b_games is None:
        return SCORES_NOT_INTEGERS
    if side_a_games < 0 or side_b_games < 0:
        return SCORES_NEGATIVE
    if side_a_games > MAX_SCORE or side_b_games > MAX_SCORE:
        return SCORES_TOO_LARGE
    if side_a_games == side_b_games:
        return TIE_NOT_ALLOWED

    slots = [_slot_id(slot) for slot in submission.slots()]
    if any(slot == "" for slot in slots):
        return PLAYERS_REQUIRED
    if len(set(slots)) != len(slots):
        return DUPLICATE_PLAYER
    return None


def _parse_played_at(value: str | date | None) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError as exc:
        raise MatchSubmissionError(INVALID_DATE) from exc


def to_new_match(submission: MatchSubmission) -> NewMatch:
    """Validate ``submission`` and convert it to typed values."""
    message = validate_match_submission(submission)
    if message is not None:
        raise MatchSubmissionError(message)

    return NewMatch(
        played_at=_parse_played_at(submission.played_at),
        side_a_games=cast(int, parse_score(submission.side_a_score)),
        side_b_games=cast(int, parse_score(submission.side_b_score)),
        side_a=(_slot_id(submission.side_a_left), _slot_id(submission.side_a_right)),
        side_b=(_slot_id(submission.side_b_left), _slot_id(submission.side_b_right)),
    )


__all__ = [
    "DATE_REQUIRED",
    "DUPLICATE_PLAYER",
    "INVALID_DATE",
    "MAX_SCORE",
    "MatchSubmission",
    "NewMatch",
    "PLAYERS_REQUIRED",
    "SCORES_NEGATIVE",
    "SCORES_NOT_INTEGERS",
    "SCORES_REQUIRED",
    "SCORES_TOO_LARGE",
    "TIE_NOT_ALLOWED",
    "parse_score",
    "to_new_match",
    "validate_match_submission",
]
