"""src/cuescan/ui/cli/display/track_listing.py
What: Render scan results as a Rich table or a JSON document.
Why: Keep console output formatting out of the command processor.
"""

from __future__ import annotations

import json
from typing import Any, final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cuescan.application.services.scan_service import ScanResult
from cuescan.shared.track_record import TrackRecord

# Album fields shown above the track table, in display order.
ALBUM_FIELDS: tuple[tuple[str, str], ...] = (
    ("album", "Album"),
    ("album_artist", "Album artist"),
    ("artist", "Artist"),
    ("title", "Title"),
    ("genre", "Genre"),
    ("date_released", "Released"),
    ("year", "Year"),
    ("disc", "Disc"),
    ("total_discs", "Discs"),
    ("comment", "Comment"),
)


def format_samples(samples: int, samplerate: int) -> str:
    """Render a sample position as ``mm:ss.ff`` (CD frames), or raw when the rate is unknown."""
    if samplerate <= 0:
        return str(samples)
    frames = samples * 75 // samplerate
    minutes, remainder = divmod(frames, 60 * 75)
    seconds, frame = divmod(remainder, 75)
    return f"{minutes:02d}:{seconds:02d}.{frame:02d}"


def format_length(milliseconds: int) -> str:
    if milliseconds <= 0:
        return ""
    minutes, seconds = divmod(milliseconds // 1000, 60)
    return f"{minutes}:{seconds:02d}"


def result_document(result: ScanResult) -> dict[str, Any]:
    """Build the JSON-serializable view of a scan result."""
    return {
        "file": str(result.file_path),
        "source": result.source.value,
        "sidecar": str(result.sidecar_path) if result.sidecar_path is not None else None,
        "codec": result.codec,
        "count": result.count,
        "album": result.album.as_dict(skip_unset=True),
        "tracks": [track.as_dict() for track in result.tracks],
    }


@final
class TrackListingDisplay:
    """Handles scan result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_json(self, result: ScanResult) -> None:
        """Print the scan result as JSON on stdout, without Rich markup."""
        self.console.out(
            json.dumps(result_document(result), ensure_ascii=False, indent=2),
            highlight=False,
        )

    def show(self, result: ScanResult) -> None:
        """Display the album fields and a table of tracks."""
        self.console.print(f"[bold]{escape(result.file_path.name)}[/bold] ({result.source.value})")
        if result.sidecar_path is not None:
            self.console.print(f"Sidecar: {escape(str(result.sidecar_path))}")

        for name, label in ALBUM_FIELDS:
            value = getattr(result.album, name)
            if value:
                self.console.print(f"  {label}: {escape(str(value))}")

        if not result.tracks:
            self.console.print("No cuesheet tracks found.")
            return

        self.console.print(self._track_table(result.tracks, result.album.samplerate))

    @staticmethod
    def _track_table(tracks: list[TrackRecord], samplerate: int) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Title")
        table.add_column("Artist")
        table.add_column("Start", justify="right")
        table.add_column("Length", justify="right")
        table.add_column("Flags")

        for track in tracks:
            flags: list[str] = []
            if track.disabled:
                flags.append("data")
            if track.isrc:
                flags.append(f"ISRC {track.isrc}")
            table.add_row(
                str(track.track_number or ""),
                escape(track.title or ""),
                escape(track.artist or ""),
                format_samples(track.sample_offset, track.samplerate or samplerate),
                format_length(track.song_length),
                ", ".join(flags),
            )
        return table


__all__ = ["TrackListingDisplay", "format_length", "format_samples", "result_document"]
