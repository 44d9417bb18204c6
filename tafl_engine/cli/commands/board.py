"""
Board command for printing the starting position.
"""

import click

from ..utils import format_board, quiet_echo
from ...game.game_state import GameState


@click.command(name='board')
def board():
    """
    Print the starting position.

    \b
    Legend:
        K  king        D  defender
        A  attacker    +  castle (throne)
        .  empty square
    """
    game = GameState()
    snapshot = game.snapshot()
    click.echo(format_board(game.grid))
    quiet_echo(f"{len(snapshot.pieces)} pieces, {game.current_turn().value} to move")
