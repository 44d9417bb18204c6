"""Game state and move orchestration for Tafl."""

from typing import List, Optional, Sequence, Union

from .constants import Side, Position, CORNERS
from .board import Grid, Piece, PieceStore
from .moves import MoveValidator
from .capture import CaptureDetector
from .types import (
    GameEvent,
    GameOver,
    Move,
    MoveOutcome,
    PieceMoved,
    PiecesCaptured,
    PieceView,
    Snapshot,
)

import logging

# Setup logger
logger = logging.getLogger(__name__)


class TurnController:
    """Tracks which side moves next."""

    def __init__(self, first: Side = Side.ATTACKER):
        self.active_side = first

    def current(self) -> Side:
        return self.active_side

    def advance(self) -> Side:
        """Hand the turn to the other side. Called once per accepted move."""
        self.active_side = self.active_side.opponent
        logger.debug(f"Turn passes to {self.active_side.value}")
        return self.active_side


class VictoryEvaluator:
    """Decides and latches the winner."""

    def __init__(self):
        self.winner: Optional[Side] = None

    def check(self, store: PieceStore, captured: Sequence[Piece]) -> Optional[Side]:
        """Check for a newly decided game. Returns the winner once, when latched."""
        if self.winner is not None:
            return None

        if any(piece.is_king for piece in captured):
            self.winner = Side.ATTACKER
            logger.info("King captured, attackers win")
        else:
            king = store.king()
            if king is not None and king.position in CORNERS:
                self.winner = Side.DEFENDER
                logger.info(f"King reached corner {king.position}, defenders win")

        return self.winner


class GameState:
    """Represents a complete Tafl game and runs the per-move pipeline."""

    def __init__(self, pieces: Optional[PieceStore] = None, first_turn: Union[Side, str] = Side.ATTACKER):
        """Initialize a new game.

        Args:
            pieces: Starting pieces. Defaults to the standard layout.
            first_turn: Side to move first, as a Side or its name.
        """
        if isinstance(first_turn, str):
            first_turn = Side.from_string(first_turn)

        self.pieces = pieces if pieces is not None else PieceStore.initial()
        self.grid: Grid = self.pieces.to_grid()
        self.turn = TurnController(first_turn)
        self.victory = VictoryEvaluator()
        self.last_captured: List[Piece] = []
        self._events: List[GameEvent] = []

    def submit_move(self, piece_id: int, destination: Position) -> MoveOutcome:
        """Validate and apply a move, resolve captures and check for victory."""
        if self.victory.winner is not None:
            logger.debug(f"Game already won by {self.victory.winner.value}")
            return MoveOutcome.REJECTED_GAME_OVER

        piece = self.pieces.get(piece_id)
        if piece is None:
            logger.debug(f"No live piece with id {piece_id}")
            return MoveOutcome.REJECTED_ILLEGAL_MOVE

        if piece.side != self.turn.current():
            logger.debug(f"{piece.side.value} tried to move on {self.turn.current().value}'s turn")
            return MoveOutcome.REJECTED_WRONG_TURN

        if not MoveValidator.is_legal(piece, destination, self.pieces.live_pieces()):
            logger.debug(f"Illegal move rejected: {piece.position} -> {destination}")
            return MoveOutcome.REJECTED_ILLEGAL_MOVE

        source = self.pieces.move(piece_id, destination)
        self.grid = self.pieces.to_grid()
        self.turn.advance()
        self._events.append(PieceMoved(piece_id, source, destination))

        captured_squares = CaptureDetector.detect(self.grid, destination)
        self.last_captured = self.pieces.capture(captured_squares)
        if self.last_captured:
            self.grid = self.pieces.to_grid()
            self._events.append(PiecesCaptured([p.id for p in self.last_captured]))
            logger.info(f"{len(self.last_captured)} piece(s) captured by move to {destination}")

        winner = self.victory.check(self.pieces, self.last_captured)
        if winner is not None:
            self._events.append(GameOver(winner))

        logger.debug(f"Board after move:\n{self.grid}")
        return MoveOutcome.ACCEPTED

    def make_move(self, move: Move) -> MoveOutcome:
        return self.submit_move(move.piece_id, move.destination)

    def move_from(self, source: Position, destination: Position) -> MoveOutcome:
        """Submit a move naming the piece by the square it stands on."""
        piece = self.pieces.piece_at(source)
        if piece is None:
            logger.debug(f"No piece on {source}")
            return MoveOutcome.REJECTED_ILLEGAL_MOVE
        return self.submit_move(piece.id, destination)

    def current_turn(self) -> Side:
        return self.turn.current()

    def is_game_over(self) -> Optional[Side]:
        return self.victory.winner

    def legal_destinations(self, piece_id: int) -> List[Position]:
        """Get legal destinations for a piece; empty when it may not move now."""
        piece = self.pieces.get(piece_id)
        if piece is None or self.victory.winner is not None:
            return []
        return MoveValidator.legal_destinations(piece, self.pieces.live_pieces())

    def snapshot(self) -> Snapshot:
        views = tuple(
            PieceView(id=p.id, side=p.side, is_king=p.is_king, position=p.position)
            for p in sorted(self.pieces, key=lambda p: p.id)
        )
        return Snapshot(
            pieces=views,
            captured_ids=tuple(p.id for p in self.last_captured),
            active_side=self.turn.current(),
            winner=self.victory.winner,
        )

    def drain_events(self) -> List[GameEvent]:
        """Return and clear the notifications queued since the last drain."""
        events, self._events = self._events, []
        return events

    def is_terminal(self) -> bool:
        return self.victory.winner is not None

    def __str__(self) -> str:
        return str(self.grid)
