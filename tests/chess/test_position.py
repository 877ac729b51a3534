"""Unit tests for /src/chess/position.py"""

import pytest

from src.chess.board import STARTING_PLACEMENT, Board
from src.chess.history import Snapshot
from src.chess.pieces import Color
from src.chess.position import PositionState
from src.core.exceptions import InvalidPositionError

STARTING_POSITION = f"{STARTING_PLACEMENT} w"


def test_parse_starting_position() -> None:
    state = PositionState.from_string(STARTING_POSITION)
    assert state.board == Board.initialize()
    assert state.active_player == Color.WHITE


def test_write_position() -> None:
    board = Board.from_placement("rnbqkbnr/pppppppp/8/8/8/4P3/PPPP1PPP/RNBQKBNR")
    state = PositionState(board, Color.BLACK)
    assert state.to_string() == "rnbqkbnr/pppppppp/8/8/8/4P3/PPPP1PPP/RNBQKBNR b"


@pytest.mark.parametrize(
    "position",
    [
        STARTING_PLACEMENT,  # missing active color
        f"{STARTING_PLACEMENT} w KQkq - 0 1",  # full FEN is not accepted
        f"{STARTING_PLACEMENT} x",  # unknown color
        "8/8/8 w",  # broken placement
    ],
)
def test_invalid_position(position: str) -> None:
    with pytest.raises(InvalidPositionError):
        PositionState.from_string(position)


def test_snapshot_conversion() -> None:
    snapshot = Snapshot(Board.initialize().snapshot(), Color.BLACK)
    state = PositionState.from_snapshot(snapshot)
    assert state.to_string() == f"{STARTING_PLACEMENT} b"
    assert state.to_snapshot() == snapshot
