"""Metadata key tables and resolver.

Where: src/cuescan/features/cuesheet/usecases/metadata_keys.py
What: Map free-form tag keys onto TrackRecord fields, generic table first, Vorbis table second.
Why: REM lines, CUE_TRACKnn comments and container tags all share one key vocabulary.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Final

from cuescan.platform.logging import logger
from cuescan.shared.track_record import TrackRecord

UINT32_MAX: Final[int] = 2**32 - 1
_UNSIGNED_PREFIX: Final[re.Pattern[str]] = re.compile(r"\s*\+?(\d+)")
_YEAR_PREFIX: Final[re.Pattern[str]] = re.compile(r"\s*(\d{4})")

KeyHandler = Callable[[TrackRecord, str], None]


class FieldKind(Enum):
    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class FieldTarget:
    """Record field written by a direct assignment entry."""

    name: str
    kind: FieldKind = FieldKind.STRING


@dataclass(frozen=True, slots=True)
class MetadataKey:
    """One key table entry: either a direct field target or a custom handler."""

    key: str
    target: FieldTarget | None = None
    handler: KeyHandler | None = None

    def matches(self, key: str) -> bool:
        return self.key.casefold() == key.casefold()


def parse_u32(text: str) -> int | None:
    """Parse an unsigned 32-bit integer prefix, ``strtoul`` style.

    Leading whitespace and trailing text are tolerated; a missing number or a
    value beyond 32 bits yields ``None``.
    """
    match = _UNSIGNED_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if value > UINT32_MAX:
        return None
    return value


def assign_field(record: TrackRecord, target: FieldTarget, value: str) -> None:
    """Write-once typed assignment of ``value`` into ``record``."""
    if not record.is_unset(target.name):
        return
    if target.kind is FieldKind.STRING:
        _ = record.assign_once(target.name, value)
        return
    number = parse_u32(value)
    if number is None:
        logger.debug("Ignoring non-numeric value %r for %s", value, target.name)
        return
    _ = record.assign_once(target.name, number)


def _assign_pair(record: TrackRecord, value: str, number_field: str, total_field: str) -> None:
    number, _, total = value.partition("/")
    parsed = parse_u32(number)
    if parsed is not None:
        _ = record.assign_once(number_field, parsed)
    if total:
        parsed_total = parse_u32(total)
        if parsed_total is not None:
            _ = record.assign_once(total_field, parsed_total)


def handle_track(record: TrackRecord, value: str) -> None:
    """``N`` or ``N/M`` into track number and total tracks."""
    _assign_pair(record, value, "track_number", "total_tracks")


def handle_disc(record: TrackRecord, value: str) -> None:
    """``N`` or ``N/M`` into disc and total discs."""
    _assign_pair(record, value, "disc", "total_discs")


def handle_date(record: TrackRecord, value: str) -> None:
    """Keep the full release date and derive the year from its leading digits."""
    stripped = value.strip()
    if not stripped:
        return
    _ = record.assign_once("date_released", stripped)
    match = _YEAR_PREFIX.match(stripped)
    if match is not None:
        _ = record.assign_once("year", int(match.group(1)))


def _str(key: str, name: str) -> MetadataKey:
    return MetadataKey(key, target=FieldTarget(name, FieldKind.STRING))


def _int(key: str, name: str) -> MetadataKey:
    return MetadataKey(key, target=FieldTarget(name, FieldKind.INTEGER))


GENERIC_KEYS: Final[tuple[MetadataKey, ...]] = (
    _str("title", "title"),
    _str("artist", "artist"),
    _str("author", "artist"),
    _str("album_artist", "album_artist"),
    _str("album", "album"),
    _str("genre", "genre"),
    _str("composer", "composer"),
    _str("grouping", "grouping"),
    _str("orchestra", "orchestra"),
    _str("conductor", "conductor"),
    _str("comment", "comment"),
    _str("description", "comment"),
    MetadataKey("track", handler=handle_track),
    MetadataKey("disc", handler=handle_disc),
    _int("year", "year"),
    MetadataKey("date", handler=handle_date),
    _str("title-sort", "title_sort"),
    _str("artist-sort", "artist_sort"),
    _str("album-sort", "album_sort"),
    _str("album_artist-sort", "album_artist_sort"),
    _str("composer-sort", "composer_sort"),
    _str("isrc", "isrc"),
)

VORBIS_KEYS: Final[tuple[MetadataKey, ...]] = (
    _str("albumartist", "album_artist"),
    _str("album artist", "album_artist"),
    _int("tracknumber", "track_number"),
    _int("tracktotal", "total_tracks"),
    _int("totaltracks", "total_tracks"),
    _int("discnumber", "disc"),
    _int("disctotal", "total_discs"),
    _int("totaldiscs", "total_discs"),
    _str("titlesort", "title_sort"),
    _str("artistsort", "artist_sort"),
    _str("albumsort", "album_sort"),
    _str("albumartistsort", "album_artist_sort"),
    _str("composersort", "composer_sort"),
    _str("replaygain_track_gain", "replaygain_track_gain"),
    _str("replaygain track gain", "replaygain_track_gain"),
    _str("replaygain_album_gain", "replaygain_album_gain"),
    _str("replaygain album gain", "replaygain_album_gain"),
)

KEY_TABLES: Final[tuple[tuple[MetadataKey, ...], ...]] = (GENERIC_KEYS, VORBIS_KEYS)


def find_key(key: str) -> MetadataKey | None:
    """Return the first entry matching ``key`` across the key tables."""
    for table in KEY_TABLES:
        for entry in table:
            if entry.matches(key):
                return entry
    return None


def is_known_key(key: str) -> bool:
    return find_key(key) is not None


def resolve_metadata(record: TrackRecord, key: str, value: str) -> bool:
    """Apply ``key``/``value`` to ``record``.

    Returns:
        bool: ``True`` when the key was recognized, even if the write-once
        rule left the record unchanged.
    """
    entry = find_key(key)
    if entry is None:
        logger.debug("Unrecognized metadata key %r (value %r) dropped", key, value)
        return False

    if entry.handler is not None:
        entry.handler(record, value)
    elif entry.target is not None:
        assign_field(record, entry.target, value)
    return True


__all__ = [
    "FieldKind",
    "FieldTarget",
    "GENERIC_KEYS",
    "KEY_TABLES",
    "KeyHandler",
    "MetadataKey",
    "VORBIS_KEYS",
    "assign_field",
    "find_key",
    "handle_date",
    "handle_disc",
    "handle_track",
    "is_known_key",
    "parse_u32",
    "resolve_metadata",
]
