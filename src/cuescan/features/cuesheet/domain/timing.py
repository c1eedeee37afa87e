"""
Summary: Timecode conversion and per-track sample span derivation.
Why: Keep the CD-audio frame arithmetic in one place for text and native cue sources.
"""

from __future__ import annotations

import re
from typing import Final

from cuescan.platform.logging import logger
from cuescan.shared.track_record import TrackRecord

FRAMES_PER_SECOND: Final[int] = 75
_LEADING_INT: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?\d+)")


def parse_leading_int(text: str) -> int:
    """Parse leading decimal digits the way C ``atoi`` does; junk yields 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def msf_to_frames(msf: str) -> int | None:
    """Convert ``minutes:seconds:frames`` into a frame count.

    Segments are not range checked and malformed segments count as zero.
    Returns ``None`` when either separator is missing.
    """
    parts = msf.split(":", 2)
    if len(parts) < 3:
        return None
    minutes, seconds, frames = (parse_leading_int(part) for part in parts)
    return (minutes * 60 + seconds) * FRAMES_PER_SECOND + frames


def msf_to_sample_offset(msf: str, samplerate: int) -> int | None:
    """Convert a timecode into a sample offset.

    With an unknown sample rate (``0``) the frame count itself is returned.
    """
    frames = msf_to_frames(msf)
    if frames is None:
        return None
    if samplerate > 0:
        return samplerate * frames // FRAMES_PER_SECOND
    return frames


def _apply_span(track: TrackRecord, start_offset: int, end_offset: int, samplerate: int) -> None:
    count = end_offset - start_offset
    if count < 0:
        logger.warning(
            "Track %d ends before it starts (offset %d, end %d); clamping to zero",
            track.track_number,
            start_offset,
            end_offset,
        )
        count = 0
    track.sample_count = count
    if samplerate > 0:
        track.song_length = count * 1000 // samplerate


def derive_span(
    earlier: TrackRecord,
    later_offset: int,
    samplerate: int,
    start_offset: int | None = None,
) -> None:
    """Set ``earlier``'s sample count and length from the next track's offset.

    ``start_offset`` overrides ``earlier.sample_offset`` as the span start,
    which is how a data track inherits the last sounding track's offset.
    """
    start = earlier.sample_offset if start_offset is None else start_offset
    _apply_span(earlier, start, later_offset, samplerate)


def finalize_last_track(
    last: TrackRecord, album: TrackRecord, start_offset: int | None = None
) -> bool:
    """Close the final track against the album's total sample count.

    Returns ``False`` and leaves the track untouched when the total is unknown.
    """
    if album.sample_count <= 0:
        return False
    start = last.sample_offset if start_offset is None else start_offset
    _apply_span(last, start, album.sample_count, album.samplerate)
    return True


__all__ = [
    "FRAMES_PER_SECOND",
    "derive_span",
    "finalize_last_track",
    "msf_to_frames",
    "msf_to_sample_offset",
    "parse_leading_int",
]
