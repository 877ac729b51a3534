"""Snapshots of earlier positions, so that moves can be taken back"""

from dataclasses import dataclass, field
from typing import Optional

from src.chess.board import Board, FrozenGrid
from src.chess.pieces import Color


@dataclass(frozen=True)
class Snapshot:
    """The full board and whose turn it was, taken right before a move was applied"""

    grid: FrozenGrid
    active_player: Color

    def board(self) -> Board:
        """Hand out a fresh copy: the snapshot itself stays untouched"""
        return Board.from_grid(self.grid)


@dataclass
class GameHistory:
    """
    Stack of snapshots (oldest first).

    NOTE: There is no redo. Undoing simply throws the snapshot away after handing it back.
    """

    snapshots: list[Snapshot] = field(default_factory=list)

    def record(self, board: Board, active_player: Color) -> None:
        """Call BEFORE the move is applied to the board"""
        self.snapshots.append(Snapshot(board.snapshot(), active_player))

    def undo(self) -> Optional[Snapshot]:
        if not self.snapshots:
            return None
        return self.snapshots.pop()

    def clear(self) -> None:
        self.snapshots.clear()

    def __len__(self) -> int:
        return len(self.snapshots)
