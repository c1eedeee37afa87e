"""Public API for the cuesheet feature."""

from .domain.native_cue import NativeCueIndex, NativeCueSheet, NativeCueTrack
from .domain.track_table import CuesheetResult, TrackTable
from .usecases.directives import CuesheetParser, parse_cuesheet
from .usecases.embedded import EmbeddedMetadataExtractor
from .usecases.metadata_keys import resolve_metadata
from .usecases.ports import (
    ContainerMetadata,
    ContainerReaderPort,
    SidecarCuesheet,
    SidecarReaderPort,
)

__all__ = [
    "CuesheetParser",
    "CuesheetResult",
    "EmbeddedMetadataExtractor",
    "NativeCueIndex",
    "NativeCueSheet",
    "NativeCueTrack",
    "TrackTable",
    "parse_cuesheet",
    "resolve_metadata",
    "ContainerMetadata",
    "ContainerReaderPort",
    "SidecarCuesheet",
    "SidecarReaderPort",
]
