"""Rules engine for 11x11 Tafl."""

__version__ = "0.1.0"
