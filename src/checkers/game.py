"""
The Game class is the rules engine and the entrypoint into the domain layer for the service layer.
Every player input is a click on a square. The Game decides whether the click selects a piece, moves it, or gets ignored,
and keeps the turn / selection / forced continuation bookkeeping consistent.

Illegal input never raises: it is rejected by clearing the selection, and the reason is reported back in the ClickResult.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.checkers.board import Board
from src.checkers.moves import (
    Move,
    MoveKind,
    candidate_jumps,
    candidate_steps,
    classify_move,
    has_another_jump,
    is_allowed_direction,
    is_jump_shape,
    is_step_shape,
)
from src.checkers.notation import CheckersState
from src.checkers.pieces import Owner, Piece, opponent_of
from src.checkers.square import Square
from src.core.exceptions import GameStateError
from src.core.models import GameModel

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


class Phase(Enum):
    AWAITING_SELECTION = auto()
    AWAITING_DESTINATION = auto()
    MUST_CONTINUE_JUMP = auto()


class ClickOutcome(Enum):
    IGNORED = auto()
    SELECTED = auto()
    STEPPED = auto()
    CAPTURED = auto()
    CAPTURE_CONTINUES = auto()
    REJECTED = auto()


class RejectionReason(Enum):
    OFF_BOARD = auto()
    NOT_YOUR_PIECE = auto()
    MUST_CONTINUE_JUMP = auto()
    LIGHT_SQUARE = auto()
    DESTINATION_OCCUPIED = auto()
    INVALID_DISTANCE = auto()
    WRONG_DIRECTION = auto()
    NO_OPPONENT_TO_CAPTURE = auto()


@dataclass(frozen=True)
class ClickResult:
    outcome: ClickOutcome
    reason: Optional[RejectionReason] = None

    @property
    def moved(self) -> bool:
        return self.outcome in (
            ClickOutcome.STEPPED,
            ClickOutcome.CAPTURED,
            ClickOutcome.CAPTURE_CONTINUES,
        )


IGNORED = ClickResult(ClickOutcome.IGNORED)


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    turn: Owner
    selection: Optional[Square] = None
    forced_continuation: Optional[Square] = None
    captured_by_red: list[Piece] = field(default_factory=list)
    captured_by_black: list[Piece] = field(default_factory=list)
    status: Status = Status.IN_PROGRESS

    @classmethod
    def new_game(cls, starting_state: Optional[str] = None) -> Self:
        """Standard setup with Red to move, unless a starting state (in state notation) is given."""
        if starting_state is None:
            state = CheckersState.starting_state()
            board = Board.starting_position()
        else:
            state = CheckersState.from_notation(starting_state)
            board = Board.from_layout(state.layout)
        game = cls(
            board=board,
            turn=state.turn,
            forced_continuation=state.forced_continuation,
            selection=state.forced_continuation,
        )
        game._assert_consistent_forced_continuation()
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from {','.join([status.name.lower() for status in Status])}"
            )

        state = CheckersState.from_notation(model.current_state)
        game = cls(
            board=Board.from_layout(state.layout),
            turn=state.turn,
            selection=Square.from_algebraic(model.selection)
            if model.selection
            else None,
            forced_continuation=state.forced_continuation,
            captured_by_red=[Piece.from_code(code) for code in model.captured_by_red],
            captured_by_black=[
                Piece.from_code(code) for code in model.captured_by_black
            ],
            status=Status[status_name],
        )
        game._assert_consistent_forced_continuation()
        return game

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""
        state = CheckersState(
            layout=self.board.to_layout(),
            turn=self.turn,
            forced_continuation=self.forced_continuation,
        )
        return GameModel(
            current_state=state.to_notation(),
            selection=self.selection.to_algebraic() if self.selection else None,
            captured_by_red=[piece.to_code() for piece in self.captured_by_red],
            captured_by_black=[piece.to_code() for piece in self.captured_by_black],
            status=self.status.name.lower().replace("_", " "),
        )

    @property
    def phase(self) -> Phase:
        if self.forced_continuation is not None:
            return Phase.MUST_CONTINUE_JUMP
        if self.selection is not None:
            return Phase.AWAITING_DESTINATION
        return Phase.AWAITING_SELECTION

    @property
    def winner(self) -> Optional[Owner]:
        """The game only ends when the player to move has no pieces left, so the previous mover won."""
        if self.status != Status.FINISHED:
            return None
        return opponent_of(self.turn)

    def piece_counts(self) -> dict[Owner, int]:
        return self.board.count_pieces()

    def handle_square_click(self, square: Square) -> ClickResult:
        """
        The single inbound transition.
        ----

        1. No selection yet? --> try to select the clicked square
        2. Clicked another one of your own pieces (and no jump must be continued)? --> re-select
        3. Otherwise the click is the destination of a move from the selected square.
        """
        if self.status != Status.IN_PROGRESS or not square.is_within_bounds():
            return IGNORED

        if self.selection is None:
            return self.select_square(square)

        if (
            self.forced_continuation is None
            and square != self.selection
            and self._is_own_piece(square)
        ):
            return self.select_square(square)

        return self.attempt_move(self.selection, square)

    def select_square(self, square: Square) -> ClickResult:
        """Choose the source of the next move. Anything but your own piece (or the forced piece, mid-chain) is ignored."""
        if self.status != Status.IN_PROGRESS or not square.is_within_bounds():
            return IGNORED

        if self.forced_continuation is not None and square != self.forced_continuation:
            return IGNORED

        if not self._is_own_piece(square):
            return IGNORED

        self.selection = square
        logger.debug("%s selected %s", self.turn.name, square.to_algebraic())
        return ClickResult(ClickOutcome.SELECTED)

    def attempt_move(self, from_square: Square, to_square: Square) -> ClickResult:
        """
        Attempt to make a move
        -----

        1. check the move can be classified as a simple step or a capture jump
        2. relocate the piece (and remove the captured one)
        3. promote if the piece landed on the far row
        4. after a capture: keep the turn if the same piece can jump again, otherwise pass it on

        Any failed check clears the selection and leaves the board untouched.
        """
        if self.status != Status.IN_PROGRESS:
            return IGNORED

        checked = self._check_move(from_square, to_square)
        if isinstance(checked, RejectionReason):
            return self._reject(from_square, to_square, checked)

        move = Move(from_square=from_square, to_square=to_square)
        if checked == MoveKind.STEP:
            self._apply_step(move)
            return ClickResult(ClickOutcome.STEPPED)
        return self._apply_jump(move)

    def legal_destinations(self, square: Square) -> list[Square]:
        """
        Squares the piece on square may move to. Can be used by the presentation layer to highlight targets.
        Mid-chain, only the forced piece has destinations and those are jumps only.
        """
        if self.status != Status.IN_PROGRESS or not square.is_within_bounds():
            return []
        if not self._is_own_piece(square):
            return []
        if self.forced_continuation is not None and square != self.forced_continuation:
            return []

        piece = self._own_piece(square)
        moves = candidate_jumps(self.board, square, piece)
        if self.forced_continuation is None:
            moves = candidate_steps(self.board, square, piece) + moves
        return [move.to_square for move in moves]

    # -- PRIVATE HELPERS ---
    def _own_piece(self, square: Square) -> Piece:
        piece = self.board.piece(square)
        # for the typechecker: only called after _is_own_piece
        assert piece is not None
        return piece

    def _is_own_piece(self, square: Square) -> bool:
        piece = self.board.piece(square)
        return piece is not None and piece.owner == self.turn

    def _check_move(
        self, from_square: Square, to_square: Square
    ) -> MoveKind | RejectionReason:
        """Either the kind of legal move, or the first reason it is not legal."""
        if not (from_square.is_within_bounds() and to_square.is_within_bounds()):
            return RejectionReason.OFF_BOARD

        if not self._is_own_piece(from_square):
            return RejectionReason.NOT_YOUR_PIECE

        if (
            self.forced_continuation is not None
            and from_square != self.forced_continuation
        ):
            return RejectionReason.MUST_CONTINUE_JUMP

        if not to_square.is_dark():
            return RejectionReason.LIGHT_SQUARE

        if not self.board.is_empty(to_square):
            return RejectionReason.DESTINATION_OCCUPIED

        move = Move(from_square=from_square, to_square=to_square)
        if not (is_step_shape(move) or is_jump_shape(move)):
            return RejectionReason.INVALID_DISTANCE

        piece = self._own_piece(from_square)
        if not is_allowed_direction(piece, move.delta[0]):
            return RejectionReason.WRONG_DIRECTION

        kind = classify_move(self.board, move, piece)
        if kind is None:
            return RejectionReason.NO_OPPONENT_TO_CAPTURE

        if self.forced_continuation is not None and kind == MoveKind.STEP:
            return RejectionReason.MUST_CONTINUE_JUMP

        return kind

    def _reject(
        self, from_square: Square, to_square: Square, reason: RejectionReason
    ) -> ClickResult:
        """Drop the selection. A pending forced continuation stays: the player has to pick that piece again."""
        self.selection = None
        logger.debug(
            "Rejected move %s -> %s by %s: %s",
            from_square.to_algebraic(),
            to_square.to_algebraic(),
            self.turn.name,
            reason.name,
        )
        return ClickResult(ClickOutcome.REJECTED, reason)

    def _apply_step(self, move: Move) -> None:
        piece = self.board.move_piece(move.from_square, move.to_square)
        self._promote_if_needed(piece, move.to_square)
        logger.info("%s played %s", self.turn.name, move.to_notation(MoveKind.STEP))
        self._end_turn()

    def _apply_jump(self, move: Move) -> ClickResult:
        """
        Capture, then check whether the same piece can continue.

        NOTE promotion happens BEFORE looking for another jump: a man crowned by this jump continues as a king.
        """
        piece = self.board.move_piece(move.from_square, move.to_square)
        captured = self.board.remove_piece(move.jumped_square)
        # for the typechecker: classification guarantees an opponent piece on the jumped square
        assert captured is not None
        self._record_capture(piece.owner, captured)
        self._promote_if_needed(piece, move.to_square)
        logger.info("%s played %s", self.turn.name, move.to_notation(MoveKind.JUMP))

        if has_another_jump(self.board, move.to_square, piece):
            self.forced_continuation = move.to_square
            self.selection = move.to_square
            logger.debug(
                "%s must continue jumping from %s",
                self.turn.name,
                move.to_square.to_algebraic(),
            )
            return ClickResult(ClickOutcome.CAPTURE_CONTINUES)

        self._end_turn()
        return ClickResult(ClickOutcome.CAPTURED)

    def _record_capture(self, capturer: Owner, captured: Piece) -> None:
        """The opponent's piece is stored in the capturer's tally."""
        if capturer == Owner.RED:
            self.captured_by_red.append(captured)
        else:
            self.captured_by_black.append(captured)

    def _promote_if_needed(self, piece: Piece, square: Square) -> None:
        if piece.is_king or not piece.reaches_promotion_row(square.row):
            return
        piece.promote()
        logger.info("%s piece crowned on %s", piece.owner.name, square.to_algebraic())

    def _end_turn(self) -> None:
        """Complete the move-sequence: pass the turn and check if the opponent has anything left to play with."""
        self.selection = None
        self.forced_continuation = None
        self.turn = opponent_of(self.turn)

        if not self.board.locate_owner(self.turn):
            self.status = Status.FINISHED
            logger.info("Game finished: %s wins", opponent_of(self.turn).name)

    def _assert_consistent_forced_continuation(self) -> None:
        """A stored forced continuation must point at one of the turn player's pieces, and that piece must have a jump left."""
        if self.forced_continuation is None:
            return
        if not self._is_own_piece(self.forced_continuation):
            raise GameStateError(
                f"Forced continuation {self.forced_continuation.to_algebraic()} does not hold a piece of {self.turn.name.lower()}."
            )

        piece = self._own_piece(self.forced_continuation)
        if not has_another_jump(self.board, self.forced_continuation, piece):
            raise GameStateError(
                f"Forced continuation {self.forced_continuation.to_algebraic()} has no capture available."
            )
