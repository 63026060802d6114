"""
Text notation for a checkers position, modelled on FEN.

<board layout><turn><forced continuation square>

* The board layout lists the rows separated by "/", starting from row 0 (Red's back rank).
  Within a row, a piece code stands for one square and a digit for that many empty squares.
  Piece codes: "r" red man, "R" red king, "b" black man, "B" black king.
* The turn is either "r" or "b"
* The forced continuation square is the algebraic name of the piece that must keep jumping, or "-" if there is none.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.pieces import CODE_TO_OWNER, OWNER_TO_CODE, Owner
from src.checkers.square import BOARD_SIZE, Square
from src.core.exceptions import InvalidLayoutError

# ASCII only. A digit in a layout is a run of empty squares.
EMPTY_RUN_DIGITS = "12345678"
FILES = "abcdefgh"
RANKS = "12345678"

STARTING_LAYOUT = "1r1r1r1r/r1r1r1r1/1r1r1r1r/8/8/b1b1b1b1/1b1b1b1b/b1b1b1b1"
STARTING_STATE = f"{STARTING_LAYOUT} r -"
EMPTY_LAYOUT = "/".join(["8"] * BOARD_SIZE)


def is_valid_state(state: str) -> bool:
    """Check if the given string follows the state notation."""
    parts = state.split(" ")
    if len(parts) != 3:
        return False

    layout, turn, forced = parts
    return (
        is_valid_layout(layout)
        and is_valid_turn_code(turn)
        and is_valid_forced_square(forced)
    )


def is_valid_layout(layout: str) -> bool:
    """Only check the board layout part. Pieces standing on light squares make the layout invalid too."""
    row_layouts = layout.split("/")
    if len(row_layouts) != BOARD_SIZE:
        return False

    for row, row_layout in enumerate(row_layouts):
        col = 0
        for character in row_layout:
            if character in EMPTY_RUN_DIGITS:
                col += int(character)
            elif character.lower() in CODE_TO_OWNER:
                if not Square(row, col).is_dark():
                    return False
                col += 1
            else:
                # immediately invalidate if the character is anything else
                return False
        if col != BOARD_SIZE:
            return False
    return True


def is_valid_turn_code(turn: str) -> bool:
    return turn in CODE_TO_OWNER


def is_valid_forced_square(forced: str) -> bool:
    if forced == "-":
        return True
    if len(forced) != 2 or not (forced[0] in FILES and forced[1] in RANKS):
        return False
    square = Square.from_algebraic(forced)
    return square.is_within_bounds() and square.is_dark()


@dataclass
class CheckersState:
    """Data that can be constructed from a state notation string."""

    layout: str
    turn: Owner
    forced_continuation: Optional[Square]

    @classmethod
    def from_notation(cls, state: str) -> Self:
        if not is_valid_state(state):
            raise InvalidLayoutError(f"Invalid state notation: {state!r}")
        layout, turn, forced = state.split(" ")
        forced_square = None if forced == "-" else Square.from_algebraic(forced)
        return cls(layout, CODE_TO_OWNER[turn], forced_square)

    @classmethod
    def starting_state(cls) -> Self:
        return cls.from_notation(STARTING_STATE)

    def to_notation(self) -> str:
        forced = (
            self.forced_continuation.to_algebraic() if self.forced_continuation else "-"
        )
        return f"{self.layout} {OWNER_TO_CODE[self.turn]} {forced}"
