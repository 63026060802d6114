"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.checkers.board import Board
from src.checkers.game import Game
from src.checkers.pieces import Owner, Piece
from src.checkers.square import Square
from src.db.schema import Base

# square name -> piece code ("r" red man, "R" red king, "b" black man, "B" black king)
Placement = dict[str, str]


def _build_board(placement: Placement) -> Board:
    board = Board.empty()
    for square_name, code in placement.items():
        board.place_piece(Piece.from_code(code), Square.from_algebraic(square_name))
    return board


@pytest.fixture
def board_with_pieces() -> Callable[[Placement], Board]:
    """Call the inner function with the pieces to place, keyed by square name"""
    return _build_board


@pytest.fixture
def game_with_pieces() -> Callable[[Placement, Owner], Game]:
    """Call the inner function with the pieces to place (by square name) and the owner to move"""

    def _create_game(placement: Placement, turn: Owner = Owner.RED) -> Game:
        return Game(board=_build_board(placement), turn=turn)

    return _create_game


# Setup an in-memory SQLite database for testing
DATABASE_URL = "sqlite:///:memory:"
engine = create_engine(
    DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autoflush=False, bind=engine)


@pytest.fixture
def db_session_repo() -> Generator[Session, None, None]:
    """Connection to a test database. Tables are removed at teardown so tests do not see each other's games."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        Base.metadata.drop_all(bind=engine)
        db.close()


@pytest.fixture
def db_session_shared() -> Generator[Session, None, None]:
    """Second connection to the same test database, like a second request hitting the same tables."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
