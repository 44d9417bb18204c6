"""Capture detection for Tafl.

Captures are only ever triggered by the square a piece just moved to.
Detection runs in two phases:

1. Enclosure: every hostile group touching the moved piece is flood-filled.
   A group with no empty square on its border is captured whole. The board
   edge, the castle and the mover's own side all close a border.
2. Flank: only when enclosure found nothing, a single neighbor sandwiched
   between the mover and a square hostile to it on the same axis is taken.
   The king is never taken this way.
"""

from typing import Optional, Set

from .constants import Position, SquareCategory
from .board import Grid
import logging

# Setup logger
logger = logging.getLogger(__name__)


class CaptureDetector:
    """Computes the squares captured by the piece that arrived at `last_moved`."""

    @staticmethod
    def detect(grid: Grid, last_moved: Position) -> Set[Position]:
        mover = grid.get(last_moved)
        if not mover.is_piece():
            logger.debug(f"No piece at {last_moved}, nothing to capture")
            return set()

        captured = CaptureDetector._enclosure_captures(grid, last_moved, mover)
        if not captured:
            captured = CaptureDetector._flank_captures(grid, last_moved)

        if captured:
            logger.debug(f"Move to {last_moved} captures {sorted(captured, key=lambda p: (p.x, p.y))}")
        return captured

    @staticmethod
    def _enclosure_captures(grid: Grid, last_moved: Position, mover: SquareCategory) -> Set[Position]:
        captured: Set[Position] = set()

        for start in last_moved.neighbors():
            if start in captured:
                continue
            if not CaptureDetector._continues_group(grid.get(start), mover):
                continue

            group = CaptureDetector._enclosed_group(grid, start, mover)
            if group is not None:
                logger.debug(f"Group of {len(group)} enclosed from {start}")
                captured |= group

        return captured

    @staticmethod
    def _continues_group(category: SquareCategory, mover: SquareCategory) -> bool:
        """A hostile piece extends a group; the castle is a wall, not a member."""
        return category.is_piece() and category.is_enemy_of(mover)

    @staticmethod
    def _enclosed_group(grid: Grid, start: Position, mover: SquareCategory) -> Optional[Set[Position]]:
        """Grow the group from `start`; return it if enclosed, None on a gap."""
        done: Set[Position] = {start}
        frontier: Set[Position] = {start}

        while frontier:
            next_frontier: Set[Position] = set()
            for pos in frontier:
                for neighbor in pos.neighbors():
                    if neighbor in done:
                        continue
                    category = grid.get(neighbor)
                    if category == SquareCategory.EMPTY:
                        # Escape route: the whole group survives
                        return None
                    if CaptureDetector._continues_group(category, mover):
                        done.add(neighbor)
                        next_frontier.add(neighbor)
                    # OFF_BOARD, CASTLE and the mover's side close the border
            frontier = next_frontier

        return done

    @staticmethod
    def _flank_captures(grid: Grid, last_moved: Position) -> Set[Position]:
        captured: Set[Position] = set()

        for neighbor in last_moved.neighbors():
            target = grid.get(neighbor)
            if not target.is_piece() or target == SquareCategory.KING:
                continue

            # Opposite flank, on the axis running through the mover
            dx = neighbor.x - last_moved.x
            dy = neighbor.y - last_moved.y
            far_side = neighbor.offset(dx, dy)

            if (grid.get(last_moved).is_enemy_of(target)
                    and grid.get(far_side).is_enemy_of(target)):
                captured.add(neighbor)

        return captured
