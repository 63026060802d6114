"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    FINISHED = "finished"


# --- NOTE the domain layer keeps its own Enum versions of Owner/Rank (src/checkers/pieces.py).
# --- These string versions are what gets sent across the API boundary.


class Owner(StrEnum):
    RED = "red"
    BLACK = "black"


class Rank(StrEnum):
    MAN = "man"
    KING = "king"


class Phase(StrEnum):
    AWAITING_SELECTION = "awaiting selection"
    AWAITING_DESTINATION = "awaiting destination"
    MUST_CONTINUE_JUMP = "must continue jump"
