"""
Utility functions for the Tafl CLI.

Provides coordinate parsing, board formatting and echo helpers.
"""

from typing import Tuple
import click

from .config import get_config
from ..game.board import Grid
from ..game.constants import Position, SquareCategory, is_valid_position
from ..game.types import MoveOutcome


SQUARE_COLORS = {
    SquareCategory.KING: 'yellow',
    SquareCategory.DEFENDER: 'white',
    SquareCategory.ATTACKER: 'red',
    SquareCategory.CASTLE: 'blue',
}

OUTCOME_MESSAGES = {
    MoveOutcome.ACCEPTED: ("accepted", "green"),
    MoveOutcome.REJECTED_ILLEGAL_MOVE: ("rejected: illegal move", "yellow"),
    MoveOutcome.REJECTED_WRONG_TURN: ("rejected: not your turn", "yellow"),
    MoveOutcome.REJECTED_GAME_OVER: ("rejected: game is over", "red"),
}


def parse_position(text: str) -> Position:
    """Parse 'x,y' into an on-board Position."""
    try:
        pos = Position.from_string(text)
    except ValueError as e:
        raise click.BadParameter(str(e))
    if not is_valid_position(pos):
        raise click.BadParameter(f"{pos} is outside the 11x11 board")
    return pos


def parse_move_spec(text: str) -> Tuple[Position, Position]:
    """Parse 'x,y:x,y' (or 'x,y x,y') into source and destination."""
    separator = ':' if ':' in text else None
    parts = text.split(separator)
    if len(parts) != 2:
        raise click.BadParameter(f"Expected 'x,y:x,y', got {text!r}")
    return parse_position(parts[0]), parse_position(parts[1])


def format_board(grid: Grid) -> str:
    """Render the grid, colored and labelled per configuration."""
    config = get_config()
    text = grid.render(show_coordinates=config.get('show_coordinates', True))
    if not config.get('color_output', True):
        return text

    by_symbol = {category.value: color for category, color in SQUARE_COLORS.items()}
    lines = []
    for line in text.split("\n"):
        lines.append("".join(
            click.style(ch, fg=by_symbol[ch]) if ch in by_symbol else ch
            for ch in line
        ))
    return "\n".join(lines)


def format_outcome(outcome: MoveOutcome) -> str:
    message, color = OUTCOME_MESSAGES[outcome]
    if get_config().get('color_output', True):
        return click.style(message, fg=color)
    return message


def verbose_echo(message: str, **kwargs):
    """Echo message only in verbose mode."""
    config = get_config()
    if config.get('verbose', False):
        click.echo(message, **kwargs)

def quiet_echo(message: str, **kwargs):
    """Echo message unless in quiet mode."""
    config = get_config()
    if not config.get('quiet', False):
        click.echo(message, **kwargs)
