"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from cuescan import __version__
from cuescan.config.config import Config
from cuescan.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from cuescan.ui.cli.args.options import ScanArgs


@final
class ArgumentParser:
    """Builds the ``cuescan`` argument parser and turns argv into ``ScanArgs``."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create the ``cuescan FILE [--json] [--verbose | --quiet]`` parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="cuescan",
            description="cuescan - Read cuesheet track metadata from a media file or its .cue sidecar.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "file_path",
            type=str,
            help="Media file to scan",
            metavar="FILE",
        )
        _ = parser.add_argument(
            "--json",
            action="store_true",
            dest="json_output",
            help="Print the album and tracks as a JSON document",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed parsing information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        return parser

    @staticmethod
    def console_level(quiet: bool, verbose: bool) -> int:
        """Map the verbosity flags onto a console log level."""
        if quiet:
            return logging.ERROR
        return logging.DEBUG if verbose else logging.INFO

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> ScanArgs:
        """Parse ``args_list``, configure logging, and check the media file exists.

        Raises:
            SystemExit: On argparse errors, ``--version``, or a missing media file.
        """
        parsed_args = ArgumentParser.create_parser().parse_args(args_list)

        configuration = Config.load()
        _ = setup_logger(
            log_file=configuration.log_file or DEFAULT_LOG_FILE,
            console_level=ArgumentParser.console_level(parsed_args.quiet, parsed_args.verbose),
        )

        file_path = Path(parsed_args.file_path)
        if not file_path.is_file():
            logger.error("Media file does not exist: %s", file_path)
            sys.exit(1)

        return ScanArgs(
            file_path=file_path,
            json_output=parsed_args.json_output,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
