"""
Representation of a single position: the configuration of the pieces plus whose turn it is.

Used to store the current board and the undo snapshots as plain strings.
"""

from dataclasses import dataclass
from typing import Self

from src.chess.board import Board
from src.chess.history import Snapshot
from src.chess.pieces import Color
from src.core.exceptions import InvalidPositionError

ACTIVE_COLOR_TO_CHAR: dict[Color, str] = {Color.WHITE: "w", Color.BLACK: "b"}
CHAR_TO_ACTIVE_COLOR: dict[str, Color] = {
    value: key for key, value in ACTIVE_COLOR_TO_CHAR.items()
}


@dataclass
class PositionState:
    """
    Data that can be constructed from a position string.
    ----

    <placement> <active color>

    * The placement is described in the Board class (the board part of a FEN string, top row first)
    * The active color is either "w" or "b"

    ex) The standard starting position:
    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w
    """

    board: Board
    active_player: Color

    @classmethod
    def from_string(cls, position: str) -> Self:
        parts = position.strip().split(" ")
        if len(parts) != 2:
            raise InvalidPositionError(
                f"Position {position!r} should contain a placement and an active color."
            )
        placement, active_char = parts
        if active_char not in CHAR_TO_ACTIVE_COLOR:
            raise InvalidPositionError(
                f"Active color should be one of {','.join(CHAR_TO_ACTIVE_COLOR)}, got {active_char!r}."
            )
        return cls(Board.from_placement(placement), CHAR_TO_ACTIVE_COLOR[active_char])

    def to_string(self) -> str:
        return f"{self.board.to_placement()} {ACTIVE_COLOR_TO_CHAR[self.active_player]}"

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> Self:
        return cls(snapshot.board(), snapshot.active_player)

    def to_snapshot(self) -> Snapshot:
        return Snapshot(self.board.snapshot(), self.active_player)
