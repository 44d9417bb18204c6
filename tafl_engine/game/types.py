"""Basic type definitions for the Tafl engine."""

from enum import Enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union
from .constants import Side, Position


class MoveOutcome(Enum):
    ACCEPTED = "ACCEPTED"
    REJECTED_ILLEGAL_MOVE = "REJECTED_ILLEGAL_MOVE"
    REJECTED_WRONG_TURN = "REJECTED_WRONG_TURN"
    REJECTED_GAME_OVER = "REJECTED_GAME_OVER"

    @property
    def accepted(self) -> bool:
        return self == MoveOutcome.ACCEPTED


@dataclass(frozen=True)
class Move:
    """A request to slide one piece to a destination square."""
    piece_id: int
    destination: Position

    def __str__(self) -> str:
        return f"piece {self.piece_id} -> {self.destination}"


@dataclass(frozen=True)
class PieceView:
    """Read-only view of a live piece handed to collaborators."""
    id: int
    side: Side
    is_king: bool
    position: Position


@dataclass(frozen=True)
class Snapshot:
    """Engine state as seen from outside after the latest step."""
    pieces: Tuple[PieceView, ...]
    captured_ids: Tuple[int, ...]
    active_side: Side
    winner: Optional[Side] = None

    def piece_at(self, position: Position) -> Optional[PieceView]:
        for piece in self.pieces:
            if piece.position == position:
                return piece
        return None


# Notifications for presentation layers

@dataclass(frozen=True)
class PieceMoved:
    piece_id: int
    source: Position
    destination: Position


@dataclass(frozen=True)
class PiecesCaptured:
    piece_ids: Tuple[int, ...]

    def __post_init__(self):
        """Convert ids list to tuple if needed."""
        if isinstance(self.piece_ids, list):
            object.__setattr__(self, 'piece_ids', tuple(self.piece_ids))


@dataclass(frozen=True)
class GameOver:
    winner: Side


GameEvent = Union[PieceMoved, PiecesCaptured, GameOver]
