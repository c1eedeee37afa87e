"""
Summary: Growable table of per-track records addressed by 1-based track number.
Why: Cuesheets may reference track numbers out of order, so slots are zero-filled on demand.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final

from cuescan.shared.track_record import TrackRecord

# Red Book audio CDs stop at track 99.
MAX_TRACK_NUMBER: Final[int] = 99


class TrackTable:
    """Owned sequence of ``TrackRecord``; track K lives at index K-1."""

    def __init__(self, records: Iterable[TrackRecord] | None = None) -> None:
        self._records: list[TrackRecord] = list(records) if records is not None else []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TrackRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> TrackRecord:
        return self._records[index]

    def ensure(self, size: int) -> int:
        """Grow the table to at least ``size`` entries.

        New slots get fresh zero-initialized records; existing slots are left
        untouched. Returns the number of slots added.
        """
        added = size - len(self._records)
        if added <= 0:
            return 0
        self._records.extend(TrackRecord() for _ in range(added))
        return added

    def track(self, number: int) -> TrackRecord:
        """Return the record for 1-based track ``number``."""
        if number < 1:
            raise IndexError(f"track numbers start at 1, got {number}")
        return self._records[number - 1]

    def records(self) -> list[TrackRecord]:
        """Return a shallow copy of the records in table order."""
        return list(self._records)

    def span_start(self, number: int) -> int:
        """Offset a span ending after track ``number`` is measured from.

        Data tracks and empty slots do not move the start forward: the
        nearest sounding track at or before ``number`` supplies it, else 0.
        """
        for record in reversed(self._records[:number]):
            if record.track_number and not record.disabled:
                return record.sample_offset
        return 0


@dataclass
class CuesheetResult:
    """Album record plus the tracks harvested from one cuesheet source."""

    album: TrackRecord
    tracks: list[TrackRecord] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.tracks)

    def sounding_tracks(self) -> list[TrackRecord]:
        """Tracks that downstream playback should sequence (non-data tracks)."""
        return [track for track in self.tracks if not track.disabled]


__all__ = ["MAX_TRACK_NUMBER", "TrackTable", "CuesheetResult"]
