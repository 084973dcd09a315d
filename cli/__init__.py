"""
CLI module for Graphoscope.

The command-line interface providing info, path, vertex and degrees commands.
"""

from cli.main import app

__all__ = ["app"]
