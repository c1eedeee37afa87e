"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import final


@final
@dataclass(slots=True)
class ScanArgs:
    """Command line arguments for scanning one media file."""

    file_path: Path
    json_output: bool
    verbose: bool
    quiet: bool


__all__ = ["ScanArgs"]
