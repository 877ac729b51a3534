"""Unit tests for /src/chess/termination.py"""

import pytest

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType
from src.chess.square import Square
from src.chess.termination import is_terminal


@pytest.mark.parametrize("color", list(Color))
def test_not_terminal_with_both_kings(color: Color) -> None:
    assert not is_terminal(Board.initialize(), color)


@pytest.mark.parametrize(
    "color, king_square", [(Color.WHITE, Square(7, 4)), (Color.BLACK, Square(0, 4))]
)
def test_terminal_when_king_missing(color: Color, king_square: Square) -> None:
    board = Board.initialize()
    board.remove_piece(king_square)
    assert is_terminal(board, color)
    # the other king is still around
    assert not is_terminal(board, color.opponent)


def test_king_anywhere_on_the_board_counts() -> None:
    board = Board.empty()
    board.place_piece(Piece(PieceType.KING, Color.BLACK), Square(5, 2))
    assert not is_terminal(board, Color.BLACK)
    assert is_terminal(board, Color.WHITE)


def test_other_pieces_do_not_count() -> None:
    """Only the king matters: a full army without its king has lost"""
    board = Board.initialize()
    board.remove_piece(Square(0, 4))
    board.place_piece(Piece(PieceType.QUEEN, Color.BLACK), Square(0, 4))
    assert is_terminal(board, Color.BLACK)
