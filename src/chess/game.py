"""
The Game class is the entrypoint into the domain layer for the service layer (or any presentation layer).
It is responsible for orchestrating all the business logic required to play a turn of the board game:
selecting a piece, checking the move, recording history, moving, and checking whether the game has ended.

None of the operations raise for input that is not allowed right now. They return False instead and leave the state as it was.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.chess.board import Board
from src.chess.history import GameHistory
from src.chess.moves import is_legal
from src.chess.pieces import AVAILABLE_COLOR_NAMES, Color, belongs_to_active_player
from src.chess.position import PositionState
from src.chess.square import Square
from src.chess.termination import is_terminal
from src.core.exceptions import GameStateError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    CONCLUDED = auto()


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    active_player: Color = Color.WHITE
    history: GameHistory = field(default_factory=GameHistory)
    selection: Optional[Square] = None
    status: Status = Status.IN_PROGRESS
    winner: Optional[Color] = None
    version: int = 0

    @classmethod
    def new_game(cls) -> Self:
        """Starting layout, white to move, nothing to undo"""
        return cls(board=Board.initialize())

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )
        if model.winner is not None and model.winner.upper() not in AVAILABLE_COLOR_NAMES:
            raise GameStateError(
                f"Invalid winner: {model.winner!r}. \nPick one from {','.join([c.lower() for c in AVAILABLE_COLOR_NAMES])}"
            )

        # create the Game
        current = PositionState.from_string(model.current_position)
        history = GameHistory(
            [
                PositionState.from_string(position).to_snapshot()
                for position in model.history_positions
            ]
        )
        selection = (
            Square.from_pair(model.selected_square)
            if model.selected_square is not None
            else None
        )
        winner = Color[model.winner.upper()] if model.winner is not None else None

        return cls(
            board=current.board,
            active_player=current.active_player,
            history=history,
            selection=selection,
            status=Status[status_name],
            winner=winner,
            version=model.version,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            current_position=PositionState(self.board, self.active_player).to_string(),
            history_positions=[
                PositionState.from_snapshot(snapshot).to_string()
                for snapshot in self.history.snapshots
            ],
            selected_square=self.selection.to_pair() if self.selection else None,
            status=self.status.name.lower(),
            winner=self.winner.name.lower() if self.winner else None,
            version=self.version,
        )

    @property
    def is_concluded(self) -> bool:
        return self.status == Status.CONCLUDED

    @property
    def can_undo(self) -> bool:
        return not self.is_concluded and len(self.history) > 0

    def restart(self) -> None:
        """
        New game on the same object.
        ---

        Board, turn, history, selection, and outcome always get reset together.
        """
        self.board = Board.initialize()
        self.active_player = Color.WHITE
        self.history.clear()
        self.selection = None
        self.status = Status.IN_PROGRESS
        self.winner = None
        self._touch()
        logger.info("Game restarted")

    def click(self, square: Square) -> bool:
        """
        A single click on the board
        ----

        * nothing selected yet --> try to select the piece on the square
        * a piece is selected --> try to move it to the square. The selection is cleared either way.

        Returns True if the click selected a piece or made a move.
        """
        if self.is_concluded:
            logger.debug("Click on %s ignored: game is over", square)
            return False

        if self.selection is None:
            return self.select(square)
        return self._move_selection_to(square)

    def select(self, square: Square) -> bool:
        """First click of a move: only your own pieces can be picked up"""
        if self.is_concluded:
            logger.debug("Selecting %s ignored: game is over", square)
            return False

        if not (
            square.is_within_bounds()
            and belongs_to_active_player(self.board.piece(square), self.active_player)
        ):
            logger.debug(
                "Selecting %s ignored: no %s piece there",
                square,
                self.active_player.name.lower(),
            )
            return False

        self.selection = square
        self._touch()
        return True

    def attempt_move(self, from_square: Square, to_square: Square) -> bool:
        """
        Both clicks in one go
        ---

        Returns True only if the move was applied. If `from_square` does not hold a piece of the player to move,
        nothing happens at all.
        """
        if not self.select(from_square):
            return False
        return self._move_selection_to(to_square)

    def undo(self) -> bool:
        """
        Take back the last move, restoring the board AND whose turn it was.

        NOTE: Not available once the game is over (only a restart reactivates the game).
        """
        if self.is_concluded:
            logger.debug("Undo ignored: game is over")
            return False

        snapshot = self.history.undo()
        if snapshot is None:
            logger.debug("Undo ignored: nothing to undo")
            return False

        self.board = snapshot.board()
        self.active_player = snapshot.active_player
        self.selection = None
        self._touch()
        logger.info("Move taken back, %s to move", self.active_player.name.lower())
        return True

    # -- PRIVATE HELPERS ---
    def _move_selection_to(self, to_square: Square) -> bool:
        """
        Second click of a move
        -----

        1. check legality
        2. update the history (with the position before the move)
        3. update the board
        4. update the game status / check for end condition
        5. hand the turn over (unless the game just ended)

        The selection is always cleared.
        """
        # for the typechecker: only called with a piece selected
        assert self.selection is not None
        from_square = self.selection
        self.selection = None
        self._touch()

        if not is_legal(self.board, from_square, to_square, self.active_player):
            logger.debug("Illegal move %s -> %s rejected", from_square, to_square)
            return False

        self.history.record(self.board, self.active_player)
        self.board.move_piece(from_square, to_square)
        logger.info(
            "%s moved %s -> %s",
            self.active_player.name.lower(),
            from_square,
            to_square,
        )

        if is_terminal(self.board, self.active_player.opponent):
            self._conclude()
        else:
            self.active_player = self.active_player.opponent
        return True

    def _conclude(self) -> None:
        """The player who just moved captured the opposing king"""
        self.status = Status.CONCLUDED
        self.winner = self.active_player
        logger.info("Game over, %s wins", self.winner.name.lower())

    def _touch(self) -> None:
        self.version += 1
