"""Main CLI module for hush.

This module re-exports the CLI for convenience. The main implementation
is in __main__.py.
"""

from hush.__main__ import cli

__all__ = ["cli"]
