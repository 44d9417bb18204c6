"""Board storage for Tafl: the square grid and the live piece store."""

from typing import Dict, Iterable, Iterator, List, Optional
from dataclasses import dataclass
import numpy as np
import logging

from .constants import (
    Position,
    Side,
    SquareCategory,
    BOARD_SIZE,
    CENTER,
    is_valid_position,
    initial_layout,
)

# Setup logger
logger = logging.getLogger(__name__)


@dataclass
class Piece:
    """A piece record. Only `position` and `captured` change during a game."""
    id: int
    side: Side
    position: Position
    is_king: bool = False
    captured: bool = False

    @property
    def category(self) -> SquareCategory:
        if self.is_king:
            return SquareCategory.KING
        if self.side == Side.DEFENDER:
            return SquareCategory.DEFENDER
        return SquareCategory.ATTACKER


class Grid:
    """Dense 11x11 map of square categories, indexed [x, y]."""

    def __init__(self):
        self.cells = np.full((BOARD_SIZE, BOARD_SIZE), SquareCategory.EMPTY.code, dtype=np.int8)
        self.cells[CENTER.x, CENTER.y] = SquareCategory.CASTLE.code

    @classmethod
    def from_pieces(cls, pieces: Iterable[Piece]) -> 'Grid':
        """Project live pieces onto a fresh grid."""
        grid = cls()
        for piece in pieces:
            if piece.captured:
                continue
            grid.set(piece.position, piece.category)
        return grid

    def copy(self) -> 'Grid':
        new_grid = Grid()
        new_grid.cells = self.cells.copy()
        return new_grid

    def get(self, pos: Position) -> SquareCategory:
        """Get the category at a position; off-board squares report OFF_BOARD."""
        if not is_valid_position(pos):
            return SquareCategory.OFF_BOARD
        return SquareCategory.from_code(self.cells[pos.x, pos.y])

    def set(self, pos: Position, category: SquareCategory) -> None:
        if not is_valid_position(pos):
            raise ValueError(f"Cannot set square outside the board: {pos}")
        if category == SquareCategory.OFF_BOARD:
            raise ValueError("OFF_BOARD is never stored in the grid")
        self.cells[pos.x, pos.y] = category.code

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) == SquareCategory.EMPTY

    def positions_of(self, category: SquareCategory) -> List[Position]:
        xs, ys = np.nonzero(self.cells == category.code)
        return [Position(int(x), int(y)) for x, y in zip(xs, ys)]

    def to_numpy_array(self) -> np.ndarray:
        """Convert grid to planes: attackers, defenders, king."""
        state = np.zeros((3, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
        state[0] = self.cells == SquareCategory.ATTACKER.code
        state[1] = self.cells == SquareCategory.DEFENDER.code
        state[2] = self.cells == SquareCategory.KING.code
        return state

    def render(self, show_coordinates: bool = True) -> str:
        """Draw the board with y=0 at the bottom."""
        result = []
        for y in reversed(range(BOARD_SIZE)):
            row = " ".join(self.get(Position(x, y)).value for x in range(BOARD_SIZE))
            result.append(f"{y:2d} {row}" if show_coordinates else row)
        if show_coordinates:
            result.append("   " + " ".join(str(x % 10) for x in range(BOARD_SIZE)))
        return "\n".join(result)

    def __str__(self) -> str:
        return self.render()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))


class PieceStore:
    """The authoritative collection of live pieces, keyed by id."""

    def __init__(self, pieces: Iterable[Piece] = ()):
        self._pieces: Dict[int, Piece] = {}
        for piece in pieces:
            self.add(piece)

    @classmethod
    def initial(cls) -> 'PieceStore':
        """Build the standard starting position."""
        return cls(
            Piece(id=index, side=side, position=position, is_king=is_king)
            for index, (side, is_king, position) in enumerate(initial_layout())
        )

    def add(self, piece: Piece) -> None:
        if piece.id in self._pieces:
            raise ValueError(f"Duplicate piece id {piece.id}")
        if not is_valid_position(piece.position):
            raise ValueError(f"Piece {piece.id} placed off the board at {piece.position}")
        if self.piece_at(piece.position) is not None:
            raise ValueError(f"Square {piece.position} is already occupied")
        if piece.is_king and self.king() is not None:
            raise ValueError("Only one king may be on the board")
        if piece.is_king and piece.side != Side.DEFENDER:
            raise ValueError("The king belongs to the defenders")
        self._pieces[piece.id] = piece

    def get(self, piece_id: int) -> Optional[Piece]:
        """Get a live piece by id."""
        return self._pieces.get(piece_id)

    def piece_at(self, pos: Position) -> Optional[Piece]:
        for piece in self._pieces.values():
            if piece.position == pos:
                return piece
        return None

    def king(self) -> Optional[Piece]:
        for piece in self._pieces.values():
            if piece.is_king:
                return piece
        return None

    def live_pieces(self) -> List[Piece]:
        return list(self._pieces.values())

    def count(self, side: Optional[Side] = None, include_king: bool = True) -> int:
        return sum(
            1 for piece in self._pieces.values()
            if (side is None or piece.side == side) and (include_king or not piece.is_king)
        )

    def move(self, piece_id: int, destination: Position) -> Position:
        """Move a piece and return where it came from. No rule checks here."""
        piece = self._pieces[piece_id]
        source = piece.position
        piece.position = destination
        logger.debug(f"Piece {piece_id} moved {source} -> {destination}")
        return source

    def capture(self, positions: Iterable[Position]) -> List[Piece]:
        """Mark the pieces on the given squares captured and drop them."""
        taken = []
        for pos in positions:
            piece = self.piece_at(pos)
            if piece is None:
                continue
            piece.captured = True
            del self._pieces[piece.id]
            taken.append(piece)
            logger.debug(f"Captured {piece.side.value} piece {piece.id} at {pos}")
        return sorted(taken, key=lambda p: p.id)

    def to_grid(self) -> Grid:
        return Grid.from_pieces(self._pieces.values())

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._pieces.values()))

    def __len__(self) -> int:
        return len(self._pieces)

    def __contains__(self, piece_id: int) -> bool:
        return piece_id in self._pieces
