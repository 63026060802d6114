"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the repository, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
StateNotation = str
SquareName = str
PieceCode = str


@dataclass
class GameModel:
    """Transport-safe representation of a checkers game used between API, Service, Repository, and Game layers."""

    current_state: StateNotation
    selection: Optional[SquareName] = None
    captured_by_red: list[PieceCode] = field(default_factory=list)
    captured_by_black: list[PieceCode] = field(default_factory=list)
    status: str = "in progress"
