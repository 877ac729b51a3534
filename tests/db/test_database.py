"""Unit tests for src/db/database.py"""

from pathlib import Path

from sqlalchemy import StaticPool, inspect
from sqlalchemy.orm import Session

from src.core.config import Settings
from src.db.database import build_engine, get_db


def test_in_memory_engine_shares_one_connection() -> None:
    engine = build_engine(Settings(database_url="sqlite:///:memory:"))
    assert isinstance(engine.pool, StaticPool)


def test_file_engine(tmp_path: Path) -> None:
    engine = build_engine(Settings(database_url=f"sqlite:///{tmp_path / 'games.db'}"))
    assert not isinstance(engine.pool, StaticPool)


def test_get_db_yields_session_with_games_table() -> None:
    generator = get_db()
    db = next(generator)
    try:
        assert isinstance(db, Session)
        assert "games" in inspect(db.get_bind()).get_table_names()
    finally:
        generator.close()
