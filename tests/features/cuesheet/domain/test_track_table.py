"""Tests for the growable track table."""

import pytest

from cuescan.features.cuesheet.domain.track_table import CuesheetResult, TrackTable
from cuescan.shared.track_record import TrackRecord


def test_ensure_zero_fills_only_new_slots() -> None:
    table = TrackTable()
    assert table.ensure(2) == 2
    table.track(1).title = "kept"
    table.track(2).sample_offset = 1234
    before = [record.as_dict() for record in table]

    assert table.ensure(5) == 3
    assert len(table) == 5
    assert [record.as_dict() for record in table][:2] == before
    for record in list(table)[2:]:
        assert record == TrackRecord()


def test_ensure_never_shrinks() -> None:
    table = TrackTable()
    _ = table.ensure(4)
    assert table.ensure(2) == 0
    assert table.ensure(4) == 0
    assert len(table) == 4


def test_track_is_one_based() -> None:
    table = TrackTable()
    _ = table.ensure(3)
    assert table.track(3) is table[2]
    with pytest.raises(IndexError):
        _ = table.track(0)


def test_records_returns_copy() -> None:
    table = TrackTable()
    _ = table.ensure(1)
    records = table.records()
    records.clear()
    assert len(table) == 1


def test_result_count_and_sounding_tracks() -> None:
    data_track = TrackRecord(track_number=2, disabled=True)
    result = CuesheetResult(
        album=TrackRecord(),
        tracks=[TrackRecord(track_number=1), data_track, TrackRecord(track_number=3)],
    )
    assert result.count == 3
    assert [t.track_number for t in result.sounding_tracks()] == [1, 3]


def test_span_start_skips_data_tracks_and_gaps() -> None:
    table = TrackTable()
    _ = table.ensure(4)
    table.track(1).track_number = 1
    table.track(1).sample_offset = 100
    table.track(3).track_number = 3
    table.track(3).sample_offset = 300
    table.track(3).disabled = True
    table.track(4).track_number = 4
    table.track(4).sample_offset = 400

    assert table.span_start(4) == 400
    assert table.span_start(3) == 100
    assert table.span_start(2) == 100
    assert TrackTable().span_start(1) == 0
