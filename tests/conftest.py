"""Shared fixtures for store and pipeline tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from repositories import ensure_schema


@pytest.fixture
def session_factory() -> Iterator[sessionmaker[Session]]:
    engine = create_db_engine("sqlite+pysqlite:///:memory:")
    ensure_schema(engine)
    yield create_session_factory(engine)
    engine.dispose()
