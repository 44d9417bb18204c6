"""Move generation and validation for Tafl."""

from typing import Iterable, List, Set

from .constants import Position, DIRECTIONS, RESTRICTED_SQUARES, is_valid_position
from .board import Piece
import logging

# Setup logger
logger = logging.getLogger(__name__)


class MoveValidator:
    """Decides whether a piece may slide to a destination. Pure, no side effects."""

    @staticmethod
    def is_legal(piece: Piece, destination: Position, live_pieces: Iterable[Piece]) -> bool:
        """Check a slide of `piece` to `destination` against the live pieces."""
        source = piece.position

        if not is_valid_position(destination):
            logger.debug(f"Destination {destination} is off the board")
            return False

        if source == destination:
            logger.debug("Null move")
            return False

        if source.x != destination.x and source.y != destination.y:
            logger.debug(f"Move {source} -> {destination} is not orthogonal")
            return False

        if destination in RESTRICTED_SQUARES and not piece.is_king:
            logger.debug(f"Only the king may stop on {destination}")
            return False

        occupied = {other.position for other in live_pieces
                    if other.id != piece.id and not other.captured}
        if not MoveValidator._is_path_clear(source, destination, occupied):
            logger.debug(f"Path {source} -> {destination} is blocked")
            return False

        return True

    @staticmethod
    def _is_path_clear(source: Position, destination: Position, occupied: Set[Position]) -> bool:
        """Check every square after source up to and including destination."""
        steps = abs(destination.x - source.x) + abs(destination.y - source.y)
        dx = (destination.x - source.x) // steps
        dy = (destination.y - source.y) // steps

        current = source
        for _ in range(steps):
            current = current.offset(dx, dy)
            if current in occupied:
                return False
        return True

    @staticmethod
    def legal_destinations(piece: Piece, live_pieces: Iterable[Piece]) -> List[Position]:
        """Get every square the piece can legally slide to."""
        occupied = {other.position for other in live_pieces
                    if other.id != piece.id and not other.captured}
        destinations = []

        for dx, dy in DIRECTIONS:
            current = piece.position
            while True:
                current = current.offset(dx, dy)
                if not is_valid_position(current) or current in occupied:
                    break
                # Non-king pieces may pass the empty throne but not stop on it
                if current in RESTRICTED_SQUARES and not piece.is_king:
                    continue
                destinations.append(current)

        logger.debug(f"Piece {piece.id} at {piece.position} has {len(destinations)} destinations")
        return sorted(destinations, key=lambda p: (p.x, p.y))
