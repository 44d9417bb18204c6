"""
Play command: a text-mode driver that feeds moves to the engine.
"""

import logging
import click
from typing import List, Optional

from ..utils import format_board, format_outcome, parse_move_spec, quiet_echo, verbose_echo
from ..config import get_config
from ...game.game_state import GameState
from ...game.types import GameOver, PiecesCaptured

logger = logging.getLogger(__name__)

QUIT_WORDS = {'q', 'quit', 'exit'}


def _play_one(game: GameState, spec: str, show_board: bool) -> None:
    """Apply a single 'x,y:x,y' move and report what happened."""
    source, destination = parse_move_spec(spec)
    mover = game.current_turn()
    outcome = game.move_from(source, destination)
    click.echo(f"{mover.value}: {source} -> {destination} {format_outcome(outcome)}")

    for event in game.drain_events():
        if isinstance(event, PiecesCaptured):
            squares = ", ".join(str(p.position) for p in game.last_captured)
            click.echo(f"captured: {squares}")
        elif isinstance(event, GameOver):
            click.echo(f"winner: {event.winner.value}")
        else:
            verbose_echo(f"event: {event}")

    if outcome.accepted and show_board:
        quiet_echo(format_board(game.grid))


@click.command(name='play')
@click.option('--move', '-m', 'moves', multiple=True,
              help="Move in x,y:x,y form (can be used multiple times)")
@click.option('--first', type=click.Choice(['attacker', 'defender']),
              help='Side that moves first (default: from config)')
@click.option('--show-board/--no-show-board', default=True,
              help='Print the board after each accepted move')
def play(moves: List[str], first: Optional[str], show_board: bool):
    """
    Play a game in the terminal.

    With --move options the moves are applied in order and the command
    exits. Without them you are prompted for moves until the game ends
    or you type 'quit'.

    \b
    Examples:
        tafl play
        tafl play --move 10,3:9,3 --move 4,4:4,1 --no-show-board
        tafl play --first defender
    """
    config = get_config()
    game = GameState(first_turn=first or config.first_turn)
    logger.debug(f"Starting game, {game.current_turn().value} moves first")

    if show_board:
        quiet_echo(format_board(game.grid))

    if moves:
        for spec in moves:
            if game.is_terminal():
                click.echo(f"ignoring {spec}: game is over")
                continue
            _play_one(game, spec, show_board)
    else:
        while not game.is_terminal():
            spec = click.prompt(f"{game.current_turn().value} to move", default='quit',
                                show_default=False)
            if spec.strip().lower() in QUIT_WORDS:
                break
            try:
                _play_one(game, spec, show_board)
            except click.BadParameter as e:
                click.echo(f"invalid input: {e.message}")

    winner = game.is_game_over()
    snapshot = game.snapshot()
    if winner is None:
        click.echo(f"game not finished, {snapshot.active_side.value} to move, "
                   f"{len(snapshot.pieces)} pieces left")
