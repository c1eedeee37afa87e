"""
Summary: Domain types and arithmetic for cuesheet track tables.
Why: Provide a stable import path for usecases and adapters.
"""

from .native_cue import (
    AUDIO_TRACK_TYPE,
    NON_AUDIO_TRACK_TYPE,
    NativeCueIndex,
    NativeCueSheet,
    NativeCueTrack,
)
from .timing import (
    FRAMES_PER_SECOND,
    derive_span,
    finalize_last_track,
    msf_to_frames,
    msf_to_sample_offset,
    parse_leading_int,
)
from .track_table import MAX_TRACK_NUMBER, CuesheetResult, TrackTable

__all__ = [
    "AUDIO_TRACK_TYPE",
    "NON_AUDIO_TRACK_TYPE",
    "FRAMES_PER_SECOND",
    "MAX_TRACK_NUMBER",
    "CuesheetResult",
    "NativeCueIndex",
    "NativeCueSheet",
    "NativeCueTrack",
    "TrackTable",
    "derive_span",
    "finalize_last_track",
    "msf_to_frames",
    "msf_to_sample_offset",
    "parse_leading_int",
]
