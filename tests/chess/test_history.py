"""Unit tests for /src/chess/history.py"""

from src.chess.board import Board
from src.chess.history import GameHistory, Snapshot
from src.chess.pieces import Color
from src.chess.square import Square


def test_history_starts_empty() -> None:
    history = GameHistory()
    assert len(history) == 0
    assert history.undo() is None


def test_record_then_undo() -> None:
    board = Board.initialize()
    history = GameHistory()
    history.record(board, Color.WHITE)
    assert len(history) == 1

    snapshot = history.undo()
    assert snapshot == Snapshot(Board.initialize().snapshot(), Color.WHITE)
    assert len(history) == 0


def test_undo_pops_most_recent_first() -> None:
    board = Board.initialize()
    history = GameHistory()
    history.record(board, Color.WHITE)
    board.move_piece(Square(6, 4), Square(5, 4))
    history.record(board, Color.BLACK)

    latest = history.undo()
    assert latest is not None
    assert latest.active_player == Color.BLACK
    assert latest.board().piece(Square(5, 4)) is not None

    earliest = history.undo()
    assert earliest is not None
    assert earliest.active_player == Color.WHITE
    assert earliest.board() == Board.initialize()

    assert history.undo() is None


def test_snapshot_unaffected_by_later_moves() -> None:
    """Recording copies the board"""
    board = Board.initialize()
    history = GameHistory()
    history.record(board, Color.WHITE)
    board.move_piece(Square(7, 1), Square(5, 2))

    snapshot = history.undo()
    assert snapshot is not None
    assert snapshot.board() == Board.initialize()


def test_snapshot_hands_out_fresh_boards() -> None:
    snapshot = Snapshot(Board.initialize().snapshot(), Color.WHITE)
    board = snapshot.board()
    board.remove_piece(Square(0, 0))
    assert snapshot.board() == Board.initialize()


def test_clear() -> None:
    history = GameHistory()
    for _ in range(3):
        history.record(Board.initialize(), Color.WHITE)
    history.clear()
    assert len(history) == 0
