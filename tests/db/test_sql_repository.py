"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.chess.game import Game
from src.chess.square import Square
from src.db.sql_repository import GameModel, SQLGameRepository


def mock_model() -> GameModel:
    return GameModel(
        current_position="rnbqkbnr/pppppppp/8/8/8/4P3/PPPP1PPP/RNBQKBNR b",
        history_positions=["rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"],
        selected_square=[1, 4],
        status="in_progress",
        winner=None,
        version=3,
    )


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = mock_model()
    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(mock_model())
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(mock_model())
    assert repo.get_game(uuid4()) is None


def test_update_game(db_session_repo: Session) -> None:
    """Update an earlier created record, including the history list and clearing the selection."""
    repo = SQLGameRepository(db_session_repo)
    new = mock_model()
    _, game_id = repo.create_game(new)

    updated = GameModel(
        current_position="rnbqkbnr/pppp1ppp/4p3/8/8/4P3/PPPP1PPP/RNBQKBNR w",
        history_positions=new.history_positions + [new.current_position],
        selected_square=None,
        status="in_progress",
        winner=None,
        version=4,
    )
    result = repo.update_game(game_id, updated)
    assert result == updated
    assert repo.get_game(game_id) == updated


def test_update_unknown_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), mock_model()) is None


def test_delete_game(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    model = mock_model()
    _, game_id = repo.create_game(model)
    assert repo.delete_game(game_id) == model
    assert repo.get_game(game_id) is None
    assert repo.delete_game(game_id) is None


def test_game_roundtrip_through_database(db_session_repo: Session) -> None:
    """A concluded game loses nothing on its way through the database"""
    game = Game.new_game()
    game.attempt_move(Square(6, 4), Square(5, 4))
    game.attempt_move(Square(1, 4), Square(2, 4))
    game.select(Square(7, 3))

    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(game.to_model())
    stored = repo.get_game(game_id)
    assert stored is not None
    assert Game.from_model(stored) == game
