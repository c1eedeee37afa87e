"""
Summary: Public surface for cuesheet parsing and extraction use cases.
Why: Provide a stable import path for services, adapters and tests.
"""

from .directives import CuesheetParser, ParseState, decode_cuesheet, parse_cuesheet
from .embedded import EmbeddedMetadataExtractor
from .metadata_keys import (
    GENERIC_KEYS,
    VORBIS_KEYS,
    FieldKind,
    FieldTarget,
    MetadataKey,
    find_key,
    parse_u32,
    resolve_metadata,
)
from .ports import ContainerMetadata, ContainerReaderPort, SidecarCuesheet, SidecarReaderPort
from .tokenizer import read_token, unquote

__all__ = [
    "GENERIC_KEYS",
    "VORBIS_KEYS",
    "ContainerMetadata",
    "ContainerReaderPort",
    "CuesheetParser",
    "EmbeddedMetadataExtractor",
    "FieldKind",
    "FieldTarget",
    "MetadataKey",
    "ParseState",
    "SidecarCuesheet",
    "SidecarReaderPort",
    "decode_cuesheet",
    "find_key",
    "parse_cuesheet",
    "parse_u32",
    "read_token",
    "resolve_metadata",
    "unquote",
]
