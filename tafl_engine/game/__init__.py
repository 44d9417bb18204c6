"""Game logic package for Tafl."""

from .constants import Side, SquareCategory, Position, BOARD_SIZE, CENTER, CORNERS
from .types import Move, MoveOutcome, PieceView, Snapshot, PieceMoved, PiecesCaptured, GameOver
from .board import Grid, Piece, PieceStore
from .moves import MoveValidator
from .capture import CaptureDetector
from .game_state import GameState, TurnController, VictoryEvaluator

__all__ = [
    'Side',
    'SquareCategory',
    'Position',
    'BOARD_SIZE',
    'CENTER',
    'CORNERS',
    'Move',
    'MoveOutcome',
    'PieceView',
    'Snapshot',
    'PieceMoved',
    'PiecesCaptured',
    'GameOver',
    'Grid',
    'Piece',
    'PieceStore',
    'MoveValidator',
    'CaptureDetector',
    'GameState',
    'TurnController',
    'VictoryEvaluator',
]
