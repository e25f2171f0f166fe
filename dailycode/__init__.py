"""Answers to short contest exercises, with a command-line solver."""

__version__ = "0.1.0"
__all__ = ["arith", "decisions", "sequences", "cli"]