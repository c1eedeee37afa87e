"""Tests for cuesheet source precedence in the scan service."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from cuescan.application.services.scan_service import (
    CueSource,
    CuesheetScanService,
    ScanEvent,
)
from cuescan.features.cuesheet import (
    ContainerMetadata,
    NativeCueIndex,
    NativeCueSheet,
    NativeCueTrack,
    SidecarCuesheet,
)
from cuescan.shared.track_record import TrackRecord

RATE = 44100
SIDECAR_TEXT = 'TITLE "From Sidecar"\nTRACK 01 AUDIO\nINDEX 01 00:00:00\n'


@pytest.fixture
def media_file(tmp_path: Path) -> Path:
    path = tmp_path / "album.flac"
    path.touch()
    return path


def _container(comments: list[str] | None = None, cue: NativeCueSheet | None = None) -> ContainerMetadata:
    return ContainerMetadata(
        album=TrackRecord(samplerate=RATE, sample_count=10 * RATE),
        comments=comments or [],
        cue=cue,
        codec="flac",
    )


def _service(container: ContainerMetadata | None, sidecar: SidecarCuesheet | None = None, **kwargs: bool) -> tuple[CuesheetScanService, MagicMock, MagicMock]:
    container_reader = MagicMock()
    container_reader.read.return_value = container
    sidecar_reader = MagicMock()
    sidecar_reader.read.return_value = sidecar
    service = CuesheetScanService(
        container_reader=container_reader,
        sidecar_reader=sidecar_reader,
        **kwargs,
    )
    return service, container_reader, sidecar_reader


def test_embedded_cuesheet_tag_wins(media_file: Path) -> None:
    comments = [
        "CUESHEET=TITLE \"Embedded\"\nTRACK 01 AUDIO\nINDEX 01 00:00:00\nTRACK 02 AUDIO\nINDEX 01 00:04:00\n",
        "CUE_TRACK01_TITLE=Ignored",
    ]
    sidecar = SidecarCuesheet(path=media_file.with_suffix(".cue"), text=SIDECAR_TEXT, encoding="utf-8")
    service, _, sidecar_reader = _service(_container(comments), sidecar)

    result = service.scan(media_file)

    assert result.source is CueSource.EMBEDDED_CUESHEET
    assert result.album.album == "Embedded"
    assert result.count == 2
    assert result.tracks[0].title is None
    assert result.tracks[0].sample_count == 4 * RATE
    assert result.tracks[1].sample_count == 6 * RATE
    assert result.codec == "flac"
    sidecar_reader.read.assert_not_called()


def test_embedded_metadata_used_without_cuesheet_tag(media_file: Path) -> None:
    cue = NativeCueSheet(
        tracks=(
            NativeCueTrack(1, 0, indexes=(NativeCueIndex(1, 0),)),
            NativeCueTrack(170, 10 * RATE),
        )
    )
    service, _, sidecar_reader = _service(_container(["CUE_TRACK01_TITLE=Only"], cue))

    result = service.scan(media_file)

    assert result.source is CueSource.EMBEDDED_METADATA
    assert result.count == 1
    assert result.tracks[0].title == "Only"
    assert result.tracks[0].sample_count == 10 * RATE
    sidecar_reader.read.assert_not_called()


def test_sidecar_used_when_embedded_yields_nothing(media_file: Path) -> None:
    sidecar_path = media_file.with_suffix(".cue")
    sidecar = SidecarCuesheet(path=sidecar_path, text=SIDECAR_TEXT, encoding="utf-8-sig")
    service, _, sidecar_reader = _service(_container(["TITLE=Tagged"]), sidecar)

    result = service.scan(media_file)

    assert result.source is CueSource.SIDECAR
    assert result.sidecar_path == sidecar_path
    assert result.album.album == "From Sidecar"
    assert result.count == 1
    assert result.tracks[0].sample_count == 10 * RATE
    sidecar_reader.read.assert_called_once_with(media_file)


def test_sidecar_used_when_container_unreadable(media_file: Path) -> None:
    sidecar = SidecarCuesheet(path=media_file.with_suffix(".cue"), text=SIDECAR_TEXT, encoding="utf-8")
    service, _, _ = _service(None, sidecar)

    result = service.scan(media_file)

    assert result.source is CueSource.SIDECAR
    assert result.codec is None
    assert result.album.samplerate == 0
    # Unknown sample rate keeps raw frame offsets.
    assert result.tracks[0].sample_offset == 0


def test_no_cuesheet_anywhere(media_file: Path) -> None:
    service, _, _ = _service(_container())

    result = service.scan(media_file)

    assert result.source is CueSource.NONE
    assert result.count == 0
    assert result.sidecar_path is None
    assert result.album.samplerate == RATE


def test_sidecar_lookup_can_be_disabled(media_file: Path) -> None:
    sidecar = SidecarCuesheet(path=media_file.with_suffix(".cue"), text=SIDECAR_TEXT, encoding="utf-8")
    service, _, sidecar_reader = _service(_container(), sidecar, scan_sidecar=False)

    result = service.scan(media_file)

    assert result.source is CueSource.NONE
    sidecar_reader.read.assert_not_called()


def test_missing_media_file_raises(tmp_path: Path) -> None:
    service, container_reader, _ = _service(_container())
    with pytest.raises(FileNotFoundError):
        _ = service.scan(tmp_path / "missing.flac")
    container_reader.read.assert_not_called()


def test_scan_emits_structured_events(media_file: Path, mocker: MockerFixture) -> None:
    log = mocker.patch("cuescan.application.services.scan_service.logger.log")
    sidecar = SidecarCuesheet(path=media_file.with_suffix(".cue"), text=SIDECAR_TEXT, encoding="utf-8")
    service, _, _ = _service(_container(), sidecar)

    _ = service.scan(media_file)

    events = [call.kwargs["extra"]["scan_event"] for call in log.call_args_list]
    assert events == [
        ScanEvent.FILE_START.value,
        ScanEvent.SIDECAR_FOUND.value,
        ScanEvent.FILE_COMPLETE.value,
    ]
    complete = log.call_args_list[-1].kwargs["extra"]
    assert complete["tracks"] == 1
    assert complete["cue_source"] == "sidecar"
    assert complete["source_path"] == str(media_file)
