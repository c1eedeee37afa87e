"""Command line interface package for cuescan."""

from cuescan.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
