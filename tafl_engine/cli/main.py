"""
Main CLI entry point for the Tafl rules engine.

This module provides the main command-line interface for the tafl tool.
"""

import logging
import click
from typing import Optional

from .config import get_config, set_config, CLIConfig
from .commands import board, moves, play


def setup_logging(verbose: bool = False, quiet: bool = False):
    """Setup logging configuration."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group(name='tafl', invoke_without_command=True)
@click.option('--config', '-c',
              help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True,
              help='Enable verbose output')
@click.option('--quiet', '-q', is_flag=True,
              help='Suppress non-essential output')
@click.option('--no-color', is_flag=True,
              help='Disable colored output')
@click.version_option(version='0.1.0', prog_name='tafl')
@click.pass_context
def cli(ctx, config: Optional[str], verbose: bool, quiet: bool, no_color: bool):
    """
    Tafl rules engine CLI

    Play and inspect 11x11 Tafl games: attackers against a king and his
    defenders.

    Examples:
        tafl board
        tafl moves 5,3
        tafl play --move 10,3:9,3 --move 4,4:4,1
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return

    # Load configuration
    if config:
        cli_config = CLIConfig(config_file=config)
    else:
        cli_config = get_config()

    # Override config with command line options
    if verbose:
        cli_config.set('verbose', True)
    if quiet:
        cli_config.set('quiet', True)
    if no_color:
        cli_config.set('color_output', False)

    setup_logging(cli_config.get('verbose', False), cli_config.get('quiet', False))
    set_config(cli_config)

    ctx.ensure_object(dict)
    ctx.obj['config'] = cli_config


# Register commands
cli.add_command(board.board)
cli.add_command(moves.moves)
cli.add_command(play.play)


@cli.command()
@click.pass_context
def config(ctx):
    """Show current configuration."""
    config_obj = ctx.obj['config']

    click.echo("Current configuration:")
    click.echo("=" * 50)

    for key, value in config_obj.to_dict().items():
        click.echo(f"{key:<25}: {value}")

    if config_obj._config_file:
        click.echo(f"\nLoaded from: {config_obj._config_file}")
    else:
        click.echo("\nUsing default configuration (no config file found)")


if __name__ == "__main__":
    cli()
