"""
CLI interface for the Tafl rules engine.

Provides command-line tools for:
- Printing the starting position
- Listing legal destinations for a piece
- Playing a game in the terminal
"""

__version__ = "0.1.0"

__all__ = ['cli']

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == 'cli':
        from .main import cli
        return cli
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
