"""The Board holds the pieces. It knows nothing about turns: the Game decides which changes are legal."""

from dataclasses import dataclass
from typing import Optional, Self

from src.checkers.notation import EMPTY_RUN_DIGITS, is_valid_layout
from src.checkers.pieces import STARTING_ROWS, Owner, Piece
from src.checkers.square import BOARD_SIZE, Square
from src.core.exceptions import InvalidLayoutError

Grid = list[list[Optional[Piece]]]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls) -> Self:
        return cls([[None] * BOARD_SIZE for _ in range(BOARD_SIZE)])

    @classmethod
    def starting_position(cls) -> Self:
        """Rows 0-2 are filled with Red men, rows 5-7 with Black men (dark squares only)"""
        board = cls.empty()
        for owner, rows in STARTING_ROWS.items():
            for row in rows:
                for col in range(BOARD_SIZE):
                    square = Square(row, col)
                    if square.is_dark():
                        board.place_piece(Piece(owner), square)
        return board

    @classmethod
    def from_layout(cls, layout: str) -> Self:
        """Construct a board from the layout part of the state notation.

        ex. standard starting position:
        1r1r1r1r/r1r1r1r1/1r1r1r1r/8/8/b1b1b1b1/1b1b1b1b/b1b1b1b1
        means:
        * row 0 reads: empty, red man, empty, red man, ...
        * rows 3 and 4 have 8 consecutive empty squares
        * black men fill the dark squares of rows 5 through 7
        """
        if not is_valid_layout(layout):
            raise InvalidLayoutError(f"Invalid board layout: {layout!r}")

        board = cls.empty()
        for row, row_layout in enumerate(layout.split("/")):
            col = 0
            for character in row_layout:
                if character in EMPTY_RUN_DIGITS:
                    # A number denotes the amount of empty squares after each other
                    col += int(character)
                else:
                    board.place_piece(Piece.from_code(character), Square(row, col))
                    col += 1
        return board

    def to_layout(self) -> str:
        """Rows are separated by slashes, row 0 first."""
        return "/".join(self._row_to_layout(row) for row in range(BOARD_SIZE))

    def _row_to_layout(self, row: int) -> str:
        characters: list[str] = []
        empty_count = 0
        for piece in self.grid[row]:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                characters.append(str(empty_count))
                empty_count = 0
            characters.append(piece.to_code())

        # if the entire row is empty, then we still place this number in the string
        if empty_count > 0:
            characters.append(str(empty_count))
        return "".join(characters)

    def piece(self, square: Square) -> Optional[Piece]:
        return self.grid[square.row][square.col]

    def is_empty(self, square: Square) -> bool:
        return self.piece(square) is None

    def place_piece(self, piece: Piece, square: Square) -> None:
        self.grid[square.row][square.col] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        """Take the piece off the board and hand it back (None if the square was empty)"""
        piece = self.piece(square)
        self.grid[square.row][square.col] = None
        return piece

    def move_piece(self, from_square: Square, to_square: Square) -> Piece:
        """Relocate a piece. Caller makes sure there is a piece to move."""
        piece = self.remove_piece(from_square)
        # for the typechecker: Game only calls this after checking the source square
        assert piece is not None
        self.place_piece(piece, to_square)
        return piece

    def locate_owner(self, owner: Owner) -> list[Square]:
        return [
            Square(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if (piece := self.grid[row][col]) is not None and piece.owner == owner
        ]

    def count_pieces(self) -> dict[Owner, int]:
        """Tally how many pieces each player has left on the board"""
        return {owner: len(self.locate_owner(owner)) for owner in Owner}
