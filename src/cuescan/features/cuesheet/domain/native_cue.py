# Where: cuescan.features.cuesheet.domain.native_cue
# What: Container-independent shape of a binary cue track table.
# Why: The extractor consumes already-decoded blocks and must not depend on mutagen.

from dataclasses import dataclass, field

AUDIO_TRACK_TYPE = 0
NON_AUDIO_TRACK_TYPE = 1


@dataclass(frozen=True, slots=True)
class NativeCueIndex:
    """Index point; ``index_offset`` is relative to the owning track's start."""

    index_number: int
    index_offset: int


@dataclass(frozen=True, slots=True)
class NativeCueTrack:
    track_number: int
    start_offset: int
    type: int = AUDIO_TRACK_TYPE
    isrc: str = ""
    pre_emphasis: bool = False
    indexes: tuple[NativeCueIndex, ...] = ()

    @property
    def is_audio(self) -> bool:
        return self.type != NON_AUDIO_TRACK_TYPE

    def first_sounding_offset(self) -> int:
        """Absolute offset of index point 1, or the track start without one."""
        for index in self.indexes:
            if index.index_number == 1:
                return self.start_offset + index.index_offset
        return self.start_offset


@dataclass(frozen=True, slots=True)
class NativeCueSheet:
    """Ordered track list whose final entry is the lead-out."""

    tracks: tuple[NativeCueTrack, ...] = field(default_factory=tuple)
    media_catalog_number: str = ""
    lead_in_samples: int = 0
    compact_disc: bool = True

    @property
    def real_tracks(self) -> tuple[NativeCueTrack, ...]:
        return self.tracks[:-1]

    @property
    def lead_out(self) -> NativeCueTrack | None:
        return self.tracks[-1] if self.tracks else None


__all__ = [
    "AUDIO_TRACK_TYPE",
    "NON_AUDIO_TRACK_TYPE",
    "NativeCueIndex",
    "NativeCueSheet",
    "NativeCueTrack",
]
