"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Checkers board is 8x8, and only the dark squares are ever played on.
BOARD_SIZE = 8


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Square:
        """Algebraic notation: column gives the file letter, row gives the rank number. 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        col = ord(sq[0]) - ord("a")
        row = int(sq[1:]) - 1
        return cls(row, col)

    def to_algebraic(self) -> str:
        return f"{chr(self.col + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_SIZE) and (0 <= self.col < BOARD_SIZE)

    def is_dark(self) -> bool:
        """Pieces only live on (and move across) the dark squares"""
        return (self.row + self.col) % 2 == 1

    def offset(self, d_row: int, d_col: int) -> Square:
        return Square(self.row + d_row, self.col + d_col)

    def midpoint(self, other: Square) -> Square:
        """The square jumped over when going from self to other (only meaningful for a two-square diagonal)"""
        return Square((self.row + other.row) // 2, (self.col + other.col) // 2)
