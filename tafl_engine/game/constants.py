"""Constants for Tafl game logic."""

from enum import Enum
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass
import logging

# Setup logger
logger = logging.getLogger(__name__)


class Side(Enum):
    DEFENDER = "defender"
    ATTACKER = "attacker"

    @property
    def opponent(self):
        """Get the opposing side."""
        return Side.ATTACKER if self == Side.DEFENDER else Side.DEFENDER

    @staticmethod
    def from_string(name: str) -> 'Side':
        """Create Side from a name like 'attacker' (case-insensitive)."""
        try:
            return Side(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown side: {name!r}") from None


class SquareCategory(Enum):
    EMPTY = "."
    DEFENDER = "D"
    ATTACKER = "A"
    KING = "K"
    CASTLE = "+"
    OFF_BOARD = "#"

    @property
    def code(self) -> int:
        """Integer code used for dense grid storage."""
        return _CATEGORY_CODES[self]

    @staticmethod
    def from_code(code: int) -> 'SquareCategory':
        return _CODE_CATEGORIES[int(code)]

    def is_piece(self) -> bool:
        return self in {SquareCategory.DEFENDER, SquareCategory.ATTACKER, SquareCategory.KING}

    def get_side(self) -> Optional[Side]:
        if self in {SquareCategory.DEFENDER, SquareCategory.KING}:
            return Side.DEFENDER
        elif self == SquareCategory.ATTACKER:
            return Side.ATTACKER
        return None

    def is_enemy_of(self, reference: 'SquareCategory') -> bool:
        """Check whether this square is hostile to a piece of category `reference`.

        The castle is hostile to every side. Empty and off-board squares are
        hostile to nobody.
        """
        if self == SquareCategory.CASTLE:
            return True
        own = self.get_side()
        other = reference.get_side()
        if own is None or other is None:
            return False
        return own != other

    def is_friendly_to(self, reference: 'SquareCategory') -> bool:
        return not self.is_enemy_of(reference)


_CATEGORY_CODES = {category: code for code, category in enumerate(SquareCategory)}
_CODE_CATEGORIES = {code: category for category, code in _CATEGORY_CODES.items()}


@dataclass(frozen=True)
class Position:
    """Represents a square on the Tafl board."""
    x: int  # 0-10, left to right
    y: int  # 0-10, bottom to top

    def __str__(self) -> str:
        """String representation of position (e.g. '4,1')."""
        return f"{self.x},{self.y}"

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"

    @staticmethod
    def from_string(pos_str: str) -> 'Position':
        """Create Position from string like '4,1'."""
        parts = pos_str.replace(" ", "").split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'x,y', got {pos_str!r}")
        try:
            return Position(int(parts[0]), int(parts[1]))
        except ValueError:
            raise ValueError(f"Coordinates must be integers: {pos_str!r}") from None

    def offset(self, dx: int, dy: int) -> 'Position':
        return Position(self.x + dx, self.y + dy)

    def neighbors(self) -> Iterator['Position']:
        """Yield the four orthogonal neighbors, including off-board ones."""
        for dx, dy in DIRECTIONS:
            yield Position(self.x + dx, self.y + dy)


# Board configuration
BOARD_SIZE = 11

# Orthogonal directions: up, down, left, right
DIRECTIONS: List[Tuple[int, int]] = [
    (0, 1),
    (0, -1),
    (-1, 0),
    (1, 0),
]

CENTER = Position(5, 5)
CORNERS = frozenset({
    Position(0, 0),
    Position(10, 10),
    Position(10, 0),
    Position(0, 10),
})
# Only the king may end a move on these squares
RESTRICTED_SQUARES = CORNERS | {CENTER}

# Starting layout
DEFENDER_PAWN_COUNT = 12
ATTACKER_COUNT = 24


def is_valid_position(pos: Position) -> bool:
    """Check if a position lies on the board."""
    return 0 <= pos.x < BOARD_SIZE and 0 <= pos.y < BOARD_SIZE


def initial_layout() -> List[Tuple[Side, bool, Position]]:
    """Return (side, is_king, position) for every piece of a new game."""
    layout = [(Side.DEFENDER, True, CENTER)]

    # Defenders: the block around the throne plus one square out on each axis
    for x in range(4, 7):
        for y in range(4, 7):
            if (x, y) == (CENTER.x, CENTER.y):
                continue
            layout.append((Side.DEFENDER, False, Position(x, y)))
    for x, y in [(5, 3), (5, 7), (7, 5), (3, 5)]:
        layout.append((Side.DEFENDER, False, Position(x, y)))

    # Attackers: five along each edge plus one step in from its middle
    for x, y in [(5, 9), (5, 1), (9, 5), (1, 5)]:
        layout.append((Side.ATTACKER, False, Position(x, y)))
    for i in range(3, 8):
        layout.append((Side.ATTACKER, False, Position(0, i)))
    for i in range(3, 8):
        layout.append((Side.ATTACKER, False, Position(10, i)))
    for i in range(3, 8):
        layout.append((Side.ATTACKER, False, Position(i, 0)))
    for i in range(3, 8):
        layout.append((Side.ATTACKER, False, Position(i, 10)))

    logger.debug(f"Initial layout has {len(layout)} pieces")
    return layout
