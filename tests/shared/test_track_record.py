"""Tests for the shared ``TrackRecord`` dataclass."""

from cuescan.shared.track_record import TrackRecord


def test_assign_once_keeps_first_value() -> None:
    record = TrackRecord()
    assert record.assign_once("title", "First")
    assert not record.assign_once("title", "Second")
    assert record.title == "First"


def test_assign_once_ignores_none() -> None:
    record = TrackRecord()
    assert not record.assign_once("genre", None)
    assert record.is_unset("genre")


def test_integer_sentinel_is_zero() -> None:
    record = TrackRecord()
    assert record.is_unset("year")
    assert record.assign_once("year", 1999)
    assert not record.assign_once("year", 2001)
    assert record.year == 1999


def test_as_dict_can_skip_unset_fields() -> None:
    record = TrackRecord(track_number=4, title="Song")
    assert record.as_dict(skip_unset=True) == {"track_number": 4, "title": "Song"}
    full = record.as_dict()
    assert full["artist"] is None
    assert full["sample_count"] == 0
