"""The Game board holds the configuration of pieces. It knows nothing about whose turn it is or which moves are legal."""

from dataclasses import dataclass
from typing import Optional, Self

from src.chess.pieces import CHAR_TO_PIECE, Color, Piece, PieceType
from src.chess.square import BOARD_DIMENSIONS, Square
from src.core.exceptions import InvalidPositionError

Grid = list[list[Optional[Piece]]]
FrozenGrid = tuple[tuple[Optional[Piece], ...], ...]

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def empty_grid() -> Grid:
    return [[None] * BOARD_DIMENSIONS[1] for _ in range(BOARD_DIMENSIONS[0])]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def initialize(cls) -> Self:
        """
        Canonical starting layout.
        ---

        * row 0: black back rank, row 1: black pawns
        * row 6: white pawns, row 7: white back rank
        * everything in between is empty

        NOTE: Only the board. Whoever calls this resets the turn, history, and outcome along with it.
        """
        grid = empty_grid()
        grid[0] = [Piece(piece_type, Color.BLACK) for piece_type in BACK_RANK]
        grid[1] = [Piece(PieceType.PAWN, Color.BLACK) for _ in range(BOARD_DIMENSIONS[1])]
        grid[6] = [Piece(PieceType.PAWN, Color.WHITE) for _ in range(BOARD_DIMENSIONS[1])]
        grid[7] = [Piece(piece_type, Color.WHITE) for piece_type in BACK_RANK]
        return cls(grid)

    @classmethod
    def empty(cls) -> Self:
        return cls(empty_grid())

    @classmethod
    def from_grid(cls, grid: FrozenGrid | Grid) -> Self:
        """Fresh (mutable) board from any grid, for instance a snapshot taken earlier"""
        return cls([list(row) for row in grid])

    @classmethod
    def from_placement(cls, placement: str) -> Self:
        """Construct a board from the placement part of a FEN string.

        Rows are separated by slashes, starting at row 0 (black's back rank), so the standard layout reads:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        * letters denote pieces (upper case white, lower case black)
        * a digit denotes that many empty squares after each other
        """
        rows = placement.split("/")
        if len(rows) != BOARD_DIMENSIONS[0]:
            raise InvalidPositionError(
                f"Placement {placement!r} should have {BOARD_DIMENSIONS[0]} rows, found {len(rows)}."
            )

        grid = empty_grid()
        for row_idx, row_text in enumerate(rows):
            col = 0
            for character in row_text:
                if character.isdigit():
                    col += int(character)
                    continue
                if character.lower() not in CHAR_TO_PIECE:
                    raise InvalidPositionError(
                        f"Unknown piece {character!r} in row {row_idx} of {placement!r}."
                    )
                if col >= BOARD_DIMENSIONS[1]:
                    raise InvalidPositionError(
                        f"Row {row_idx} of {placement!r} has more than {BOARD_DIMENSIONS[1]} squares."
                    )
                grid[row_idx][col] = Piece.from_char(character)
                col += 1

            if col != BOARD_DIMENSIONS[1]:
                raise InvalidPositionError(
                    f"Row {row_idx} of {placement!r} does not describe exactly {BOARD_DIMENSIONS[1]} squares."
                )
        return cls(grid)

    def to_placement(self) -> str:
        return "/".join(self._row_to_placement(row) for row in self.grid)

    def _row_to_placement(self, row: list[Optional[Piece]]) -> str:
        characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.to_char())

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Optional[Piece], square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> None:
        self.place_piece(None, square)

    def move_piece(self, from_square: Square, to_square: Square) -> None:
        """Whatever stood on the target square is captured by overwriting it"""
        piece_that_moved = self.piece(from_square)
        self.place_piece(piece_that_moved, to_square)
        self.remove_piece(from_square)

    def locate(self, piece: Piece) -> list[Square]:
        return [
            Square(row_idx, col_idx)
            for row_idx, row in enumerate(self.grid)
            for col_idx, found in enumerate(row)
            if found == piece
        ]

    def snapshot(self) -> FrozenGrid:
        """Immutable copy. Pieces themselves are frozen, so copying the rows is enough"""
        return tuple(tuple(row) for row in self.grid)
