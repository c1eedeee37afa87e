"""Container metadata reader backed by mutagen.

Where: src/cuescan/features/cuesheet/adapters/mutagen_adapter.py
What: Decode stream info, tag comments and the FLAC CUESHEET block into core types.
Why: The cuesheet core consumes plain strings and dataclasses, never mutagen objects.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, final

import mutagen
from mutagen._util import MutagenError
from mutagen.flac import FLAC, CueSheet

from cuescan.platform.logging import logger
from cuescan.shared.track_record import TrackRecord

from ..domain.native_cue import NativeCueIndex, NativeCueSheet, NativeCueTrack
from ..usecases.metadata_keys import resolve_metadata
from ..usecases.ports import ContainerMetadata

# Comment names consumed by the cuesheet extractor rather than the album tags.
_CUE_COMMENT_PREFIXES: tuple[str, ...] = ("cuesheet", "cue_track")


def _text(value: Any) -> str:
    if isinstance(value, bytes):
        return value.rstrip(b"\x00").decode("ascii", errors="replace")
    return str(value or "").rstrip("\x00")


def convert_cue_sheet(cue: CueSheet) -> NativeCueSheet:
    """Convert a mutagen FLAC cue sheet into a ``NativeCueSheet``."""
    tracks = tuple(
        NativeCueTrack(
            track_number=int(track.track_number),
            start_offset=int(track.start_offset),
            type=int(track.type),
            isrc=_text(track.isrc),
            pre_emphasis=bool(track.pre_emphasis),
            indexes=tuple(
                NativeCueIndex(
                    index_number=int(index.index_number),
                    index_offset=int(index.index_offset),
                )
                for index in track.indexes
            ),
        )
        for track in cue.tracks
    )
    return NativeCueSheet(
        tracks=tracks,
        media_catalog_number=_text(cue.media_catalog_number),
        lead_in_samples=int(cue.lead_in_samples),
        compact_disc=bool(cue.compact_disc),
    )


def comment_entries(tags: Any) -> list[str]:
    """Flatten a mutagen tag container into ``KEY=value`` strings.

    Only textual values are kept; binary frames (pictures, ID3 frames) are skipped.
    """
    if tags is None:
        return []

    as_dict = getattr(tags, "as_dict", None)
    mapping: dict[str, Any] = as_dict() if callable(as_dict) else dict(tags.items())

    entries: list[str] = []
    for key, values in mapping.items():
        if isinstance(values, str):
            values = [values]
        if not isinstance(values, list):
            continue
        for value in values:
            if isinstance(value, str):
                entries.append(f"{key}={value}")
    return entries


@final
class MutagenContainerReader:
    """Read container metadata with ``mutagen.File``."""

    def read(self, file_path: Path) -> ContainerMetadata | None:
        try:
            audio = mutagen.File(file_path, easy=True)
        except MutagenError as exc:
            logger.warning("Failed to read container metadata from %s: %s", file_path, exc)
            return None

        if audio is None:
            logger.debug("No container metadata reader for %s", file_path)
            return None

        album = self._stream_record(audio.info)
        comments = comment_entries(audio.tags)
        for entry in comments:
            key, separator, value = entry.partition("=")
            if not separator or key.casefold().startswith(_CUE_COMMENT_PREFIXES):
                continue
            _ = resolve_metadata(album, key, value)

        cue: NativeCueSheet | None = None
        if isinstance(audio, FLAC) and audio.cuesheet is not None:
            cue = convert_cue_sheet(audio.cuesheet)

        codec = type(audio).__name__.lower()
        logger.debug(
            "Read %s metadata from %s: %d comment(s), cue block %s",
            codec,
            file_path,
            len(comments),
            "present" if cue is not None else "absent",
        )
        return ContainerMetadata(album=album, comments=comments, cue=cue, codec=codec)

    @staticmethod
    def _stream_record(info: Any) -> TrackRecord:
        """Seed the album record with sample rate and total sample count."""
        album = TrackRecord()
        samplerate = int(getattr(info, "sample_rate", 0) or 0)
        album.samplerate = samplerate

        total_samples = int(getattr(info, "total_samples", 0) or 0)
        if total_samples:
            album.sample_count = total_samples
        else:
            length = float(getattr(info, "length", 0.0) or 0.0)
            if samplerate and length:
                album.sample_count = round(length * samplerate)
        return album


__all__ = ["MutagenContainerReader", "comment_entries", "convert_cue_sheet"]
