"""Unit tests for /src/checkers/square.py"""

from string import ascii_lowercase

import pytest

from src.checkers.square import BOARD_SIZE, Square


@pytest.mark.parametrize(
    "row, col, notation",
    [
        (row, col, f"{ascii_lowercase[col]}{row + 1}")
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
    ],
)
def test_algebraic_notation(row: int, col: int, notation: str) -> None:
    """Column gives the file letter, row gives the rank number (row 0 is rank 1)"""
    assert Square.from_algebraic(notation) == Square(row, col)
    assert Square(row, col).to_algebraic() == notation


def test_square_within_bounds() -> None:
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            assert Square(row, col).is_within_bounds()


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (BOARD_SIZE, 0), (0, BOARD_SIZE)])
def test_square_out_of_bounds(row: int, col: int) -> None:
    assert not Square(row, col).is_within_bounds()


def test_dark_squares() -> None:
    """(row + col) odd is dark. Exactly half the board is playable."""
    assert Square(0, 1).is_dark()
    assert Square(2, 1).is_dark()
    assert not Square(0, 0).is_dark()
    assert not Square(3, 1).is_dark()
    dark = [
        Square(row, col)
        for row in range(BOARD_SIZE)
        for col in range(BOARD_SIZE)
        if Square(row, col).is_dark()
    ]
    assert len(dark) == BOARD_SIZE * BOARD_SIZE // 2


def test_offset_and_midpoint() -> None:
    square = Square(4, 3)
    assert square.offset(2, 2) == Square(6, 5)
    assert square.offset(-2, 2) == Square(2, 5)
    assert square.midpoint(Square(6, 5)) == Square(5, 4)
    assert square.midpoint(Square(2, 1)) == Square(3, 2)
