"""Player store backed by SQLAlchemy."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from domain.common import Player
from domain.errors import DuplicatePlayerError
from domain.players import normalize_player_name
from models import Player as PlayerModel


def _to_domain(model: PlayerModel) -> Player:
    return Player(id=model.id, name=model.name)


def list_players(session: Session) -> list[Player]:
    """Fetch all players ordered by name."""
    statement = select(PlayerModel).order_by(PlayerModel.name, PlayerModel.id)
    return [_to_domain(model) for model in session.execute(statement).scalars().all()]


def find_player_by_name(session: Session, name: str) -> Player | None:
    """Case-insensitive lookup on the trimmed name."""
    normalized = normalize_player_name(name).lower()
    statement = select(PlayerModel).where(func.lower(PlayerModel.name) == normalized)
    model = session.execute(statement).scalars().first()
    return None if model is None else _to_domain(model)


def create_player(session: Session, name: str) -> Player:
    """Insert a player; names are unique ignoring case. Caller commits."""
    normalized = normalize_player_name(name)
    if find_player_by_name(session, normalized) is not None:
        raise DuplicatePlayerError(normalized)

    model = PlayerModel(name=normalized)
    session.add(model)
    session.flush()
    return _to_domain(model)


__all__ = ["create_player", "find_player_by_name", "list_players"]
