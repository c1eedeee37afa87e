"""Summary: Ports defining cuesheet scan dependencies.
Why: Decouple the scan use case from mutagen and the filesystem so tests and swaps stay simple."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, runtime_checkable

from cuescan.shared.track_record import TrackRecord

from ..domain.native_cue import NativeCueSheet


@dataclass(slots=True)
class ContainerMetadata:
    """Already-decoded metadata of one media file.

    ``album`` carries the stream info (sample rate, total samples) and the
    container tags; ``comments`` are raw ``KEY=value`` comment entries.
    """

    album: TrackRecord
    comments: list[str] = field(default_factory=list)
    cue: NativeCueSheet | None = None
    codec: str | None = None


@dataclass(frozen=True, slots=True)
class SidecarCuesheet:
    """Decoded sidecar cuesheet and where it came from."""

    path: Path
    text: str
    encoding: str


@runtime_checkable
class ContainerReaderPort(Protocol):
    """Port for reading container-native metadata."""

    def read(self, file_path: Path) -> ContainerMetadata | None:
        """Return decoded metadata, or ``None`` when the file cannot be read."""
        ...


@runtime_checkable
class SidecarReaderPort(Protocol):
    """Port for locating and decoding a sidecar cuesheet."""

    def read(self, file_path: Path) -> SidecarCuesheet | None:
        """Return the first sidecar cuesheet found for ``file_path``."""
        ...


__all__ = [
    "ContainerMetadata",
    "ContainerReaderPort",
    "SidecarCuesheet",
    "SidecarReaderPort",
]
