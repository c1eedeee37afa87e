"""Command line interface for cuescan."""

from typing import final

from cuescan.application.services.scan_service import CuesheetScanService
from cuescan.platform.logging import logger
from cuescan.ui.cli.args import ArgumentParser, ScanArgs
from cuescan.ui.cli.display import TrackListingDisplay


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code; 0 on success, 1 on error, 130 on interrupt.
        """
        try:
            args: ScanArgs = ArgumentParser.process_args(args_list)

            result = CuesheetScanService().scan(args.file_path)
            display = TrackListingDisplay()
            if args.json_output:
                display.show_json(result)
            elif not args.quiet:
                display.show(result)
            return 0

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            return 130
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            return 1


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    return CommandProcessor.process_command()
