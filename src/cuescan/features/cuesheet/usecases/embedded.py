"""Embedded cuesheet metadata extraction.

Where: src/cuescan/features/cuesheet/usecases/embedded.py
What: Build the track table from container comments and a native cue block.
Why: Containers such as FLAC carry cue data without a sidecar file; consumers see the same shape.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import ClassVar, final

from cuescan.platform.logging import logger
from cuescan.shared.track_record import TrackRecord

from ..domain.native_cue import NativeCueSheet
from ..domain.timing import derive_span
from ..domain.track_table import MAX_TRACK_NUMBER, CuesheetResult, TrackTable
from .metadata_keys import is_known_key, resolve_metadata


@final
class EmbeddedMetadataExtractor:
    """Harvest track records from decoded container metadata.

    The native cue block runs before the comment scan: it is the authority
    for timing, while ``CUE_TRACKnn_FIELD`` comments are the authority for
    descriptive tags. Native ISRCs are applied after the comments, so they
    only fill tracks the comments left without one.
    """

    CUE_TRACK_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"cue_track(?P<track>\d+)_(?P<name>[^=]+)=(?P<value>.*)",
        re.IGNORECASE | re.DOTALL,
    )
    CUESHEET_PREFIX: ClassVar[str] = "cuesheet="

    def find_cuesheet(self, comments: Iterable[str]) -> str | None:
        """Return the text of the first ``CUESHEET=`` comment, if any."""
        prefix_length = len(self.CUESHEET_PREFIX)
        for entry in comments:
            if entry[:prefix_length].casefold() == self.CUESHEET_PREFIX:
                return entry[prefix_length:]
        return None

    def scan_comments(self, table: TrackTable, comments: Iterable[str]) -> int:
        """Apply ``CUE_TRACKnn_FIELD=value`` comments to their tracks.

        Returns:
            int: Number of comment entries that matched a known key.
        """
        applied = 0
        for entry in comments:
            match = self.CUE_TRACK_PATTERN.fullmatch(entry)
            if match is None:
                continue

            track_number = int(match.group("track"))
            name = match.group("name")
            if not 1 <= track_number <= MAX_TRACK_NUMBER:
                logger.debug("Ignoring comment for out-of-range track: %r", entry)
                continue
            if not is_known_key(name):
                logger.debug("Unrecognized cue track field %r dropped", name)
                continue

            _ = table.ensure(track_number)
            _ = resolve_metadata(table.track(track_number), name, match.group("value"))
            applied += 1
        return applied

    def scan_cue_block(self, table: TrackTable, album: TrackRecord, cue: NativeCueSheet) -> int:
        """Populate timing from a native cue block.

        The final block entry is the lead-out: it only closes the last real
        track and never becomes a record itself. Spans are measured from the
        last audio track, so a data track absorbs the time it interrupts.

        Returns:
            int: Number of real tracks described by the block.
        """
        real_tracks = cue.real_tracks
        if not real_tracks:
            return 0

        _ = table.ensure(len(real_tracks))
        span_start = 0
        for position, native in enumerate(real_tracks):
            record = table[position]
            if not record.track_number:
                record.track_number = position + 1
            record.subtrack = True
            record.sample_offset = native.first_sounding_offset()
            if position > 0:
                derive_span(
                    table[position - 1],
                    record.sample_offset,
                    album.samplerate,
                    start_offset=span_start,
                )
            if native.is_audio:
                span_start = record.sample_offset
            else:
                record.disabled = True

        lead_out = cue.lead_out
        if lead_out is not None:
            derive_span(
                table[len(real_tracks) - 1],
                lead_out.start_offset,
                album.samplerate,
                start_offset=span_start,
            )
        return len(real_tracks)

    @staticmethod
    def fill_native_isrcs(table: TrackTable, cue: NativeCueSheet) -> int:
        """Copy cue block ISRCs into tracks that have none yet.

        Runs after the comment scan, so ``CUE_TRACKnn_ISRC`` comments win.
        """
        filled = 0
        for position, native in enumerate(cue.real_tracks[: len(table)]):
            if native.isrc and table[position].assign_once("isrc", native.isrc):
                filled += 1
        return filled

    def extract(
        self,
        album: TrackRecord,
        comments: Iterable[str] = (),
        cue: NativeCueSheet | None = None,
    ) -> CuesheetResult:
        """Build the track list from whichever embedded sources are present."""
        comment_list = list(comments)
        table = TrackTable()
        if cue is not None:
            described = self.scan_cue_block(table, album, cue)
            logger.debug("Native cue block described %d track(s)", described)
        applied = self.scan_comments(table, comment_list)
        logger.debug("Applied %d CUE_TRACK comment(s)", applied)
        if cue is not None:
            _ = self.fill_native_isrcs(table, cue)
        return CuesheetResult(album=album, tracks=table.records())


__all__ = ["EmbeddedMetadataExtractor"]
