"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from typing import Optional
from uuid import UUID

from src.api.models import (
    ClickRequest,
    ClickResponse,
    CreateGameRequest,
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    PieceView,
    RestartGameRequest,
)
from src.checkers.game import Game
from src.checkers.notation import CheckersState
from src.checkers.pieces import Piece
from src.checkers.square import Square
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import Owner, Phase, Rank, Status
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class CheckersService:
    """Orchestration of layers for a checkers game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- API routes logic ---
    def create_new_game(self, request: CreateGameRequest) -> GameResponse:
        """Start a new game, from the standard setup or from the requested starting state."""

        new_game = Game.new_game(starting_state=request.starting_state)
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.info("Created game %s", game_id)

        return self._create_game_response(game_id, Game.from_model(stored_game))

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """
        Retrieve current game state.
        ----
        The presentation layer reads this after every click to re-render the board.
        """
        game = Game.from_model(self._fetch_game(request.game_id))
        return self._create_game_response(request.game_id, game)

    def click_square(self, request: ClickRequest) -> ClickResponse:
        """A player clicked a square: select, move, or ignore, as the rules engine decides."""

        # Retrieve persisted GameModel from repository
        stored_model = self._fetch_game(request.game_id)

        # Create a new Game instance from the retrieved GameModel
        game = Game.from_model(stored_model)

        # Hand the click to the rules engine
        result = game.handle_square_click(Square(request.row, request.col))

        # store in repository
        self.repo.update_game(request.game_id, game.to_model())

        return ClickResponse(
            game=self._create_game_response(request.game_id, game),
            outcome=result.outcome.name.lower(),
            rejection_reason=result.reason.name.lower() if result.reason else None,
        )

    def legal_destinations(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Which squares the piece on the requested square could move to right now."""
        game = Game.from_model(self._fetch_game(request.game_id))
        destinations = game.legal_destinations(Square.from_algebraic(request.square))
        return LegalMovesResponse(
            game_id=request.game_id,
            square=request.square,
            destinations=[square.to_algebraic() for square in destinations],
        )

    def restart_game(self, request: RestartGameRequest) -> GameResponse:
        """Replace the stored game wholesale by a fresh standard setup."""
        self._fetch_game(request.game_id)

        fresh_game = Game.new_game()
        self.repo.update_game(request.game_id, fresh_game.to_model())
        logger.info("Restarted game %s", request.game_id)
        return self._create_game_response(request.game_id, fresh_game)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Handle a request to delete a Game record."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, game: Game) -> GameResponse:
        """Convert the domain Game into a GameResponse (for game with given ID.)"""
        state = CheckersState(
            layout=game.board.to_layout(),
            turn=game.turn,
            forced_continuation=game.forced_continuation,
        )
        winner = game.winner
        return GameResponse(
            game_id=game_id,
            board=[[_piece_view(piece) for piece in row] for row in game.board.grid],
            turn=Owner[game.turn.name],
            phase=Phase[game.phase.name],
            selection=_square_name(game.selection),
            forced_continuation=_square_name(game.forced_continuation),
            captured_by_red=[_piece_view(piece) for piece in game.captured_by_red],
            captured_by_black=[_piece_view(piece) for piece in game.captured_by_black],
            status=Status[game.status.name],
            winner=Owner[winner.name] if winner else None,
            state=state.to_notation(),
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model


def _piece_view(piece: Optional[Piece]) -> Optional[PieceView]:
    if piece is None:
        return None
    return PieceView(owner=Owner[piece.owner.name], rank=Rank[piece.rank.name])


def _square_name(square: Optional[Square]) -> Optional[str]:
    return square.to_algebraic() if square else None
