"""Defines the types of chess pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.WHITE else Color.WHITE


AVAILABLE_COLOR_NAMES = [color.name for color in Color]

CHAR_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_CHAR: dict[PieceType, str] = {
    value: key for key, value in CHAR_TO_PIECE.items()
}

# Glyphs shown by a presentation layer. (Data only: the rules never look at these.)
PIECE_SYMBOLS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: {
        PieceType.KING: "♔",
        PieceType.QUEEN: "♕",
        PieceType.ROOK: "♖",
        PieceType.BISHOP: "♗",
        PieceType.KNIGHT: "♘",
        PieceType.PAWN: "♙",
    },
    Color.BLACK: {
        PieceType.KING: "♚",
        PieceType.QUEEN: "♛",
        PieceType.ROOK: "♜",
        PieceType.BISHOP: "♝",
        PieceType.KNIGHT: "♞",
        PieceType.PAWN: "♟",
    },
}


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: Color

    @classmethod
    def from_char(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = CHAR_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_char(self) -> str:
        return (
            PIECE_TO_CHAR[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_CHAR[self.type].lower()
        )

    @classmethod
    def from_symbol(cls, symbol: str) -> Self:
        for color, symbols in PIECE_SYMBOLS.items():
            for piece_type, glyph in symbols.items():
                if glyph == symbol:
                    return cls(piece_type, color)
        raise KeyError(symbol)

    @property
    def symbol(self) -> str:
        return PIECE_SYMBOLS[self.color][self.type]


def ownership_of(piece: Piece) -> Color:
    """Which player a piece belongs to"""
    return piece.color


def belongs_to_active_player(square_piece: Piece | None, active_player: Color) -> bool:
    """An empty square belongs to nobody"""
    if square_piece is None:
        return False
    return ownership_of(square_piece) == active_player
