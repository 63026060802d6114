"""Protocol repository: what the checkers service needs from storage. SQLGameRepository implements it on SQLAlchemy."""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Stores one GameModel per game ID: the state notation, the pending selection, both capture tallies and the status."""

    def get_game(self, game_id: UUID) -> GameModel | None:
        """Return a copy of the stored game, or None for an unknown ID."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Insert a fresh game under a newly generated ID and return what was stored together with that ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the whole record (no partial updates). None when the ID is unknown."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove the record and return its last state, or None when the ID is unknown."""
        ...
