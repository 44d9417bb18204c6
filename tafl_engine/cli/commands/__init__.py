"""
Command modules for the Tafl CLI.

This package contains the individual command implementations for the CLI.
"""

from . import board
from . import moves
from . import play

__all__ = ['board', 'moves', 'play']
