"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Callable
from uuid import UUID

from src.api.models import (
    ClickRequest,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    MoveRequest,
    RestartRequest,
    SelectRequest,
    UndoRequest,
)
from src.chess.game import Game
from src.chess.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Color, Status
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)

GameAction = Callable[[Game], bool]


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """A player requested to start a new game."""

        # Create a new Game, and convert into GameModel
        created_game_data = Game.new_game().to_model()

        # Store the GameModel in the repository
        stored_game, game_id = self.repo.create_game(created_game_data)
        logger.info("Created game %s", game_id)

        # Return a GameResponse
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by a frontend to (re)draw the board.
        """
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def click(self, request: ClickRequest) -> GameResponse:
        """A click on a square: selects a piece or moves the selected one."""
        square = Square.from_pair(request.square)
        return self._apply(request.game_id, lambda game: game.click(square))

    def select(self, request: SelectRequest) -> GameResponse:
        """First click of a move."""
        square = Square.from_pair(request.square)
        return self._apply(request.game_id, lambda game: game.select(square))

    def make_move(self, request: MoveRequest) -> GameResponse:
        """Make a move attempt (both clicks in one request)."""
        from_square = Square.from_pair(request.from_square)
        to_square = Square.from_pair(request.to_square)
        return self._apply(
            request.game_id, lambda game: game.attempt_move(from_square, to_square)
        )

    def undo(self, request: UndoRequest) -> GameResponse:
        """Take back the last move."""
        return self._apply(request.game_id, lambda game: game.undo())

    def restart(self, request: RestartRequest) -> GameResponse:
        """Start over with the same game ID."""

        def _restart(game: Game) -> bool:
            game.restart()
            return True

        return self._apply(request.game_id, _restart)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)
        logger.info("Deleted game %s", request.game_id)

    # -- Internal helpers --
    def _apply(self, game_id: UUID, action: GameAction) -> GameResponse:
        """
        1. Retrieve persisted GameModel from repository
        2. Create a Game instance from it
        3. Perform the action
        4. Store the updated state (only if something changed)
        5. Return a GameResponse
        """
        stored_model = self._fetch_game(game_id)
        game = Game.from_model(stored_model)
        version_before = game.version

        accepted = action(game)

        updated_model = game.to_model()
        if game.version != version_before:
            self.repo.update_game(game_id, updated_model)
        return self._create_game_response(game_id, updated_model, accepted)

    def _create_game_response(
        self, game_id: UUID, model: GameModel, accepted: bool = True
    ) -> GameResponse:
        """Convert info in GameModel to a GameResponse (for game with given ID.)"""
        game = Game.from_model(model)
        board = [
            [piece.to_char() if piece else None for piece in row]
            for row in game.board.grid
        ]
        return GameResponse(
            game_id=game_id,
            board=board,
            active_player=Color(game.active_player.name.lower()),
            selection=model.selected_square,
            status=Status(model.status.replace("_", " ")),
            winner=Color(model.winner) if model.winner else None,
            can_undo=game.can_undo,
            history_length=len(game.history),
            version=game.version,
            accepted=accepted,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
