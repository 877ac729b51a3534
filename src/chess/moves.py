"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the movement rule for each piece type.

Every rule answers a single question: may the piece on `from_square` go to `to_square`?
Captures follow the same rules as moves (the destination may hold an enemy piece), except for pawns which can never capture.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType, belongs_to_active_player
from src.chess.square import Square


class Board(Protocol):
    """Just the parts the movement rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @property
    def delta(self) -> Vector:
        return (
            self.to_square.row - self.from_square.row,
            self.to_square.col - self.from_square.col,
        )

    def is_straight(self) -> bool:
        """Along a single row or a single column"""
        d_row, d_col = self.delta
        return (d_row == 0) != (d_col == 0)

    def is_diagonal(self) -> bool:
        d_row, d_col = self.delta
        return d_row != 0 and abs(d_row) == abs(d_col)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


# --- PATH OBSTRUCTION ---
def path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    """
    Walk from source to destination one square at a time
    ---

    Only the squares strictly in between are visited: the source holds the moving piece and the destination
    is checked by the self-capture rule.

    NOTE: only defined for straight lines and diagonals (otherwise the walk never reaches the destination).
    """
    move = Move(from_square, to_square)
    if not (move.is_straight() or move.is_diagonal()):
        raise ValueError(
            f"No straight or diagonal path from {from_square} to {to_square}."
        )

    d_row, d_col = move.delta
    step_row, step_col = _sign(d_row), _sign(d_col)
    row = from_square.row + step_row
    col = from_square.col + step_col
    while (row, col) != (to_square.row, to_square.col):
        if not board.is_empty(Square(row, col)):
            return False
        row += step_row
        col += step_col
    return True


# --- MOVEMENT RULES ---
def white_pawn_rule(move: Move, board: Board) -> bool:
    """White pawns move up the board (towards row 0): one square, same column, never onto a piece."""
    d_row, d_col = move.delta
    return d_col == 0 and d_row == -1 and board.is_empty(move.to_square)


def black_pawn_rule(move: Move, board: Board) -> bool:
    """Mirror of the white pawn: down the board (towards row 7)"""
    d_row, d_col = move.delta
    return d_col == 0 and d_row == 1 and board.is_empty(move.to_square)


def pawn_rule(move: Move, board: Board) -> bool:
    """
    A pawn:
    - moves by a single square forward
    - only onto an empty square

    NOTE: No double step from the starting row, no diagonal capture, no en passant, no promotion.
    """
    pawn = board.piece(move.from_square)
    # for the type checker: rules are only looked up for the piece standing on from_square
    assert pawn is not None
    if pawn.color == Color.WHITE:
        return white_pawn_rule(move, board)
    return black_pawn_rule(move, board)


def knight_rule(move: Move, board: Board) -> bool:
    """Knights jump: |delta_row|, |delta_col| is (2, 1) or (1, 2). Whatever stands in between does not matter."""
    d_row, d_col = move.delta
    return {abs(d_row), abs(d_col)} == {1, 2}


def bishop_rule(move: Move, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    return move.is_diagonal() and path_clear(board, move.from_square, move.to_square)


def rook_rule(move: Move, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    return move.is_straight() and path_clear(board, move.from_square, move.to_square)


def queen_rule(move: Move, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return (move.is_straight() or move.is_diagonal()) and path_clear(
        board, move.from_square, move.to_square
    )


def king_rule(move: Move, board: Board) -> bool:
    """
    The king can move by a single square at the time, in any direction.

    No castling.
    """
    d_row, d_col = move.delta
    return abs(d_row) <= 1 and abs(d_col) <= 1


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MovementRuleFn = Callable[[Move, Board], bool]
MOVEMENT_RULES: dict[PieceType, MovementRuleFn] = {
    PieceType.PAWN: pawn_rule,
    PieceType.KNIGHT: knight_rule,
    PieceType.BISHOP: bishop_rule,
    PieceType.ROOK: rook_rule,
    PieceType.QUEEN: queen_rule,
    PieceType.KING: king_rule,
}


def is_legal(
    board: Board, from_square: Square, to_square: Square, active_player: Color
) -> bool:
    """
    Can the active player move the piece on `from_square` to `to_square`?
    ----

    1. Nothing to move (or off the board)? --> not legal
    2. Target holds one of your own pieces? --> not legal, whatever piece you move
    3. Otherwise the movement rule of the piece on `from_square` decides.

    NOTE: There is no notion of check. Capturing the opponent's king is just another capture.
    """
    if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
        return False

    piece = board.piece(from_square)
    if piece is None:
        return False

    if belongs_to_active_player(board.piece(to_square), active_player):
        return False

    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(Move(from_square, to_square), board)
