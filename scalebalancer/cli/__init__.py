"""Command-line interface."""

from scalebalancer.cli.main import main

__all__ = ["main"]
