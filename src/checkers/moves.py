"""
Geometry of checkers moves.

A move is classified purely by its displacement, the moving piece's rank/owner, and (for jumps) what stands on the midpoint.
Turn order and forced continuations are checked later by Game.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Protocol

from src.checkers.pieces import FORWARD_DIRECTION, Piece
from src.checkers.square import Square


class Board(Protocol):
    """Just the parts the move rules need"""

    def piece(self, square: Square) -> Optional[Piece]: ...
    def is_empty(self, square: Square) -> bool: ...


Vector = tuple[int, int]

DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


class MoveKind(Enum):
    STEP = auto()
    JUMP = auto()


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    def to_notation(self, kind: MoveKind = MoveKind.STEP) -> str:
        separator = "x" if kind == MoveKind.JUMP else "-"
        return f"{self.from_square.to_algebraic()}{separator}{self.to_square.to_algebraic()}"

    @property
    def delta(self) -> Vector:
        return (
            self.to_square.row - self.from_square.row,
            self.to_square.col - self.from_square.col,
        )

    @property
    def jumped_square(self) -> Square:
        return self.from_square.midpoint(self.to_square)


# --- DIRECTION RULES ---
def step_directions(piece: Piece) -> list[Vector]:
    """Kings go along all four diagonals, men only along the two forward ones"""
    if piece.is_king:
        return list(DIAGONALS)
    forward = FORWARD_DIRECTION[piece.owner]
    return [(d_row, d_col) for d_row, d_col in DIAGONALS if d_row == forward]


def jump_directions(piece: Piece) -> list[Vector]:
    return [(2 * d_row, 2 * d_col) for d_row, d_col in step_directions(piece)]


def is_allowed_direction(piece: Piece, d_row: int) -> bool:
    return piece.is_king or (d_row * FORWARD_DIRECTION[piece.owner] > 0)


# --- CLASSIFICATION ---
def is_step_shape(move: Move) -> bool:
    d_row, d_col = move.delta
    return abs(d_row) == 1 and abs(d_col) == 1


def is_jump_shape(move: Move) -> bool:
    d_row, d_col = move.delta
    return abs(d_row) == 2 and abs(d_col) == 2


def is_capture_target(board: Board, move: Move, piece: Piece) -> bool:
    """The jumped square must hold one of the opponent's pieces"""
    jumped = board.piece(move.jumped_square)
    return jumped is not None and jumped.is_opponent_of(piece)


def classify_move(board: Board, move: Move, piece: Piece) -> Optional[MoveKind]:
    """
    Decide if the move is a legal simple step, a legal capture jump, or neither (None).
    ---

    NOTE: does not check the destination is empty/dark, nor whose turn it is. Game does that first.
    """
    d_row, _ = move.delta
    if not is_allowed_direction(piece, d_row):
        return None

    if is_step_shape(move):
        return MoveKind.STEP

    if is_jump_shape(move) and is_capture_target(board, move, piece):
        return MoveKind.JUMP

    return None


# --- QUERIES ---
def candidate_jumps(board: Board, square: Square, piece: Piece) -> list[Move]:
    """All the jumps the piece standing on square could make right now."""
    jumps: list[Move] = []
    for d_row, d_col in jump_directions(piece):
        landing = square.offset(d_row, d_col)
        if not landing.is_within_bounds():
            continue

        move = Move(from_square=square, to_square=landing)
        if board.is_empty(landing) and is_capture_target(board, move, piece):
            jumps.append(move)
    return jumps


def candidate_steps(board: Board, square: Square, piece: Piece) -> list[Move]:
    steps: list[Move] = []
    for d_row, d_col in step_directions(piece):
        target = square.offset(d_row, d_col)
        if target.is_within_bounds() and board.is_empty(target):
            steps.append(Move(from_square=square, to_square=target))
    return steps


def has_another_jump(board: Board, square: Square, piece: Piece) -> bool:
    """Can the piece that just landed on square capture again? (Evaluated with the piece as it is AFTER promotion.)"""
    return len(candidate_jumps(board, square, piece)) > 0
