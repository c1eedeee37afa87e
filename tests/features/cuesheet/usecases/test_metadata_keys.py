"""Tests for the two-tier metadata key resolver."""

import pytest

from cuescan.features.cuesheet.usecases.metadata_keys import (
    GENERIC_KEYS,
    VORBIS_KEYS,
    find_key,
    parse_u32,
    resolve_metadata,
)
from cuescan.shared.track_record import TrackRecord


def test_generic_keys_resolve_case_insensitively() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "TITLE", "Song")
    assert resolve_metadata(record, "Artist", "Band")
    assert record.title == "Song"
    assert record.artist == "Band"


def test_aliases_share_a_field() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "author", "Writer")
    assert resolve_metadata(record, "artist", "Ignored")
    assert record.artist == "Writer"


def test_vorbis_table_is_consulted_after_generic() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "ALBUMARTIST", "Various")
    assert resolve_metadata(record, "REPLAYGAIN ALBUM GAIN", "-6.20 dB")
    assert record.album_artist == "Various"
    assert record.replaygain_album_gain == "-6.20 dB"


def test_generic_table_wins_for_shared_names() -> None:
    entry = find_key("album_artist")
    assert entry is not None
    assert entry in GENERIC_KEYS
    assert find_key("albumartist") in VORBIS_KEYS


def test_unknown_key_is_reported_and_ignored() -> None:
    record = TrackRecord()
    assert not resolve_metadata(record, "MUSICBRAINZ_TRACKID", "abc")
    assert record == TrackRecord()


@pytest.mark.parametrize(
    ("key", "values"),
    [
        ("title", ["First", "Second", "Third"]),
        ("genre", ["Rock", "Jazz"]),
        ("replaygain_track_gain", ["-1.00 dB", "+2.00 dB"]),
    ],
)
def test_write_once_for_strings(key: str, values: list[str]) -> None:
    record = TrackRecord()
    for value in values:
        assert resolve_metadata(record, key, value)
    entry = find_key(key)
    assert entry is not None and entry.target is not None
    assert getattr(record, entry.target.name) == values[0]


def test_write_once_for_integers() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "year", "1999")
    assert resolve_metadata(record, "year", "2005")
    assert record.year == 1999


def test_non_numeric_integer_value_leaves_field_unset() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "discnumber", "one")
    assert record.disc == 0
    assert resolve_metadata(record, "discnumber", "2")
    assert record.disc == 2


def test_track_handler_splits_total() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "track", "3/12")
    assert record.track_number == 3
    assert record.total_tracks == 12


def test_disc_handler_without_total() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "disc", "2")
    assert record.disc == 2
    assert record.total_discs == 0


def test_date_handler_keeps_date_and_year() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "date", "2003-07-14")
    assert record.date_released == "2003-07-14"
    assert record.year == 2003


def test_date_handler_without_year_prefix() -> None:
    record = TrackRecord()
    assert resolve_metadata(record, "date", "summer")
    assert record.date_released == "summer"
    assert record.year == 0


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("42", 42),
        ("  7 of 9", 7),
        ("+5", 5),
        ("4294967295", 4294967295),
        ("4294967296", None),
        ("", None),
        ("-1", None),
        ("x1", None),
    ],
)
def test_parse_u32(text: str, expected: int | None) -> None:
    assert parse_u32(text) == expected
