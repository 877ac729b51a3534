"""
End of the game.

NOTE: This is NOT checkmate detection. A game ends once a king has actually been captured.
"""

from src.chess.board import Board
from src.chess.pieces import Color, Piece, PieceType


def is_terminal(board: Board, color_to_check: Color) -> bool:
    """True if the king of `color_to_check` is no longer on the board"""
    king = Piece(PieceType.KING, color_to_check)
    return not any(piece == king for row in board.grid for piece in row)
