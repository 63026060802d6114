"""Unit tests for /src/checkers/moves.py"""

from typing import Callable

import pytest

from src.checkers.board import Board
from src.checkers.moves import (
    Move,
    MoveKind,
    candidate_jumps,
    candidate_steps,
    classify_move,
    has_another_jump,
    jump_directions,
    step_directions,
)
from src.checkers.pieces import Owner, Piece, Rank
from src.checkers.square import Square

BoardBuilder = Callable[[dict[str, str]], Board]


def test_move_notation() -> None:
    move = Move(Square(2, 1), Square(3, 2))
    assert move.from_square == Square(2, 1)
    assert move.to_square == Square(3, 2)
    assert move.to_notation() == "b3-c4"


def test_move_geometry() -> None:
    move = Move(Square(4, 3), Square(6, 5))
    assert move.delta == (2, 2)
    assert move.jumped_square == Square(5, 4)


@pytest.mark.parametrize(
    "piece, expected",
    [
        (Piece(Owner.RED), {(1, 1), (1, -1)}),
        (Piece(Owner.BLACK), {(-1, 1), (-1, -1)}),
        (Piece(Owner.RED, Rank.KING), {(1, 1), (1, -1), (-1, 1), (-1, -1)}),
        (Piece(Owner.BLACK, Rank.KING), {(1, 1), (1, -1), (-1, 1), (-1, -1)}),
    ],
)
def test_directions(piece: Piece, expected: set[tuple[int, int]]) -> None:
    """Men only go forward (Red toward higher rows, Black toward lower rows), kings go anywhere"""
    assert set(step_directions(piece)) == expected
    assert set(jump_directions(piece)) == {(2 * dr, 2 * dc) for dr, dc in expected}


def test_classify_simple_step(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "r"})
    piece = Piece(Owner.RED)
    assert classify_move(board, Move(Square(4, 3), Square(5, 4)), piece) == MoveKind.STEP
    assert classify_move(board, Move(Square(4, 3), Square(5, 2)), piece) == MoveKind.STEP


def test_man_cannot_step_backwards(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "r"})
    assert classify_move(board, Move(Square(4, 3), Square(3, 2)), Piece(Owner.RED)) is None


def test_king_can_step_backwards(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "R"})
    king = Piece(Owner.RED, Rank.KING)
    assert classify_move(board, Move(Square(4, 3), Square(3, 2)), king) == MoveKind.STEP


def test_classify_jump_over_opponent(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "r", "e6": "b"})
    move = Move(Square(4, 3), Square(6, 5))
    assert classify_move(board, move, Piece(Owner.RED)) == MoveKind.JUMP


@pytest.mark.parametrize(
    "placement",
    [
        {"d5": "r"},  # nothing to jump over
        {"d5": "r", "e6": "r"},  # cannot jump your own piece
    ],
)
def test_jump_needs_opponent_on_midpoint(
    board_with_pieces: BoardBuilder, placement: dict[str, str]
) -> None:
    board = board_with_pieces(placement)
    move = Move(Square(4, 3), Square(6, 5))
    assert classify_move(board, move, Piece(Owner.RED)) is None


@pytest.mark.parametrize(
    "to_square",
    [Square(7, 6), Square(4, 5), Square(5, 3), Square(7, 0)],
)
def test_other_distances_are_illegal(
    board_with_pieces: BoardBuilder, to_square: Square
) -> None:
    board = board_with_pieces({"d5": "R"})
    move = Move(Square(4, 3), to_square)
    assert classify_move(board, move, Piece(Owner.RED, Rank.KING)) is None


def test_candidate_steps_stay_on_board(board_with_pieces: BoardBuilder) -> None:
    """A red man on the right edge has only one forward diagonal"""
    board = board_with_pieces({"h2": "r"})
    steps = candidate_steps(board, Square(1, 7), Piece(Owner.RED))
    assert [move.to_square for move in steps] == [Square(2, 6)]


def test_candidate_jumps(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "R", "e6": "b", "c4": "b", "c6": "r", "e4": "b", "f3": "b"})
    king = Piece(Owner.RED, Rank.KING)
    jumps = {move.to_square for move in candidate_jumps(board, Square(4, 3), king)}
    # e6 -> f7 is free, c4 -> b3 is free, c6 is own piece, e4 -> f3 is blocked
    assert jumps == {Square(6, 5), Square(2, 1)}


def test_has_another_jump_for_man(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "r", "e6": "b"})
    assert has_another_jump(board, Square(4, 3), Piece(Owner.RED))


def test_man_has_no_backward_jump(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "r", "c4": "b"})
    assert not has_another_jump(board, Square(4, 3), Piece(Owner.RED))


def test_king_has_backward_jump(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "R", "c4": "b"})
    assert has_another_jump(board, Square(4, 3), Piece(Owner.RED, Rank.KING))


def test_no_jump_off_the_board(board_with_pieces: BoardBuilder) -> None:
    """Landing square would be row 8"""
    board = board_with_pieces({"f7": "r", "g8": "b"})
    assert not has_another_jump(board, Square(6, 5), Piece(Owner.RED))


def test_no_jump_onto_occupied_square(board_with_pieces: BoardBuilder) -> None:
    board = board_with_pieces({"d5": "r", "e6": "b", "f7": "b"})
    assert not has_another_jump(board, Square(4, 3), Piece(Owner.RED))
