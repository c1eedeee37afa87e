"""Command line argument handling package."""

from cuescan.ui.cli.args.options import ScanArgs
from cuescan.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "ScanArgs"]
