"""Defines the checkers pieces and which way they move"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self

from src.checkers.square import BOARD_SIZE


class Rank(Enum):
    MAN = auto()
    KING = auto()


class Owner(Enum):
    RED = auto()
    BLACK = auto()


# Red starts at the top of the grid (row 0) and moves down, Black the other way around.
FORWARD_DIRECTION: dict[Owner, int] = {
    Owner.RED: 1,
    Owner.BLACK: -1,
}

PROMOTION_ROW: dict[Owner, int] = {
    Owner.RED: BOARD_SIZE - 1,
    Owner.BLACK: 0,
}

STARTING_ROWS: dict[Owner, range] = {
    Owner.RED: range(0, 3),
    Owner.BLACK: range(BOARD_SIZE - 3, BOARD_SIZE),
}

CODE_TO_OWNER: dict[str, Owner] = {
    "r": Owner.RED,
    "b": Owner.BLACK,
}

OWNER_TO_CODE: dict[Owner, str] = {value: key for key, value in CODE_TO_OWNER.items()}


def opponent_of(owner: Owner) -> Owner:
    return Owner.BLACK if owner == Owner.RED else Owner.RED


@dataclass
class Piece:
    owner: Owner
    rank: Rank = Rank.MAN

    @classmethod
    def from_code(cls, character: str) -> Self:
        # lower case: men, upper case: kings
        owner = CODE_TO_OWNER[character.lower()]
        rank = Rank.KING if character.isupper() else Rank.MAN
        return cls(owner, rank)

    def to_code(self) -> str:
        code = OWNER_TO_CODE[self.owner]
        return code.upper() if self.is_king else code

    @property
    def is_king(self) -> bool:
        return self.rank == Rank.KING

    def is_opponent_of(self, other: "Piece") -> bool:
        return self.owner != other.owner

    def promote(self) -> None:
        """One-way: a king never goes back to being a man"""
        self.rank = Rank.KING

    def reaches_promotion_row(self, row: int) -> bool:
        return row == PROMOTION_ROW[self.owner]
