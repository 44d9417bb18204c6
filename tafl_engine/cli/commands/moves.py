"""
Moves command for listing legal destinations from the starting position.
"""

import click

from ..utils import parse_position, verbose_echo
from ..config import get_config
from ...game.game_state import GameState


@click.command(name='moves')
@click.argument('square')
def moves(square: str):
    """
    List the legal destinations of the piece on SQUARE (given as x,y)
    in the starting position.

    \b
    Examples:
        tafl moves 5,3
        tafl moves 0,5
    """
    position = parse_position(square)
    game = GameState(first_turn=get_config().first_turn)
    piece = game.pieces.piece_at(position)
    if piece is None:
        raise click.ClickException(f"No piece on {position}")

    destinations = game.legal_destinations(piece.id)
    kind = "king" if piece.is_king else piece.side.value
    verbose_echo(f"Piece {piece.id} ({kind}) at {position}")

    if not destinations:
        click.echo(f"The {kind} on {position} cannot move")
        return
    click.echo(" ".join(str(dest) for dest in destinations))
