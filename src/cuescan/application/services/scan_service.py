"""Application service that resolves the cuesheet of one media file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any, final

from cuescan.config.settings import SCAN_SIDECAR
from cuescan.features.cuesheet import (
    ContainerReaderPort,
    EmbeddedMetadataExtractor,
    SidecarReaderPort,
    parse_cuesheet,
)
from cuescan.features.cuesheet.adapters import MutagenContainerReader, SidecarReader
from cuescan.platform.logging import logger
from cuescan.shared.track_record import TrackRecord


class CueSource(StrEnum):
    """Where the track list of a scan came from."""

    EMBEDDED_CUESHEET = "embedded_cuesheet"
    EMBEDDED_METADATA = "embedded_metadata"
    SIDECAR = "sidecar"
    NONE = "none"


class ScanEvent(StrEnum):
    """Structured event identifiers for scan logs."""

    FILE_START = "scan.file.start"
    FILE_COMPLETE = "scan.file.complete"
    FILE_NONE = "scan.file.none"
    FILE_ERROR = "scan.file.error"
    SIDECAR_FOUND = "scan.sidecar.found"


@dataclass(slots=True)
class ScanResult:
    """Outcome of scanning one media file."""

    file_path: Path
    album: TrackRecord
    tracks: list[TrackRecord] = field(default_factory=list)
    source: CueSource = CueSource.NONE
    sidecar_path: Path | None = None
    codec: str | None = None

    @property
    def count(self) -> int:
        return len(self.tracks)


@final
class CuesheetScanService:
    """Application façade wiring readers into the cuesheet use cases.

    Sources are tried in order and the first one that applies wins:
    an embedded ``CUESHEET`` comment, embedded per-track metadata (native
    cue block and ``CUE_TRACKnn_*`` comments), then a sidecar ``.cue`` file.
    """

    _container_reader: ContainerReaderPort
    _sidecar_reader: SidecarReaderPort
    _extractor: EmbeddedMetadataExtractor
    _scan_sidecar: bool

    def __init__(
        self,
        *,
        container_reader: ContainerReaderPort | None = None,
        sidecar_reader: SidecarReaderPort | None = None,
        extractor: EmbeddedMetadataExtractor | None = None,
        scan_sidecar: bool | None = None,
    ) -> None:
        self._container_reader = container_reader or MutagenContainerReader()
        self._sidecar_reader = sidecar_reader or SidecarReader()
        self._extractor = extractor or EmbeddedMetadataExtractor()
        self._scan_sidecar = SCAN_SIDECAR if scan_sidecar is None else scan_sidecar

    def scan(self, file_path: Path | str) -> ScanResult:
        """Resolve album and track records for ``file_path``.

        Raises:
            FileNotFoundError: If ``file_path`` does not exist.
        """
        path = Path(file_path)
        if not path.exists():
            self._log(
                logging.ERROR,
                ScanEvent.FILE_ERROR,
                "File not found: %s",
                path,
                source_path=path,
                error_message="file not found",
            )
            raise FileNotFoundError(f"File not found: {path}")

        self._log(logging.DEBUG, ScanEvent.FILE_START, "Scanning %s", path, source_path=path)
        result = self._resolve(path)

        if result.source is CueSource.NONE:
            self._log(logging.INFO, ScanEvent.FILE_NONE, "No cuesheet for %s", path, source_path=path)
        else:
            self._log(
                logging.INFO,
                ScanEvent.FILE_COMPLETE,
                "Scanned %s: %d track(s) from %s",
                path,
                result.count,
                result.source.value,
                source_path=path,
                tracks=result.count,
                cue_source=result.source.value,
            )
        return result

    def _resolve(self, path: Path) -> ScanResult:
        container = self._container_reader.read(path)
        album = container.album if container is not None else TrackRecord()
        codec = container.codec if container is not None else None

        if container is not None:
            embedded_text = self._extractor.find_cuesheet(container.comments)
            if embedded_text is not None:
                parsed = parse_cuesheet(embedded_text, album)
                return ScanResult(
                    file_path=path,
                    album=parsed.album,
                    tracks=parsed.tracks,
                    source=CueSource.EMBEDDED_CUESHEET,
                    codec=codec,
                )

            extracted = self._extractor.extract(album, container.comments, container.cue)
            if extracted.count > 0:
                return ScanResult(
                    file_path=path,
                    album=extracted.album,
                    tracks=extracted.tracks,
                    source=CueSource.EMBEDDED_METADATA,
                    codec=codec,
                )

        if self._scan_sidecar:
            sidecar = self._sidecar_reader.read(path)
            if sidecar is not None:
                self._log(
                    logging.DEBUG,
                    ScanEvent.SIDECAR_FOUND,
                    "Using sidecar %s (%s)",
                    sidecar.path,
                    sidecar.encoding,
                    source_path=sidecar.path,
                    base_path=path.parent,
                )
                parsed = parse_cuesheet(sidecar.text, album)
                return ScanResult(
                    file_path=path,
                    album=parsed.album,
                    tracks=parsed.tracks,
                    source=CueSource.SIDECAR,
                    sidecar_path=sidecar.path,
                    codec=codec,
                )

        return ScanResult(file_path=path, album=album, codec=codec)

    @staticmethod
    def _log(
        level: int,
        event: ScanEvent,
        message: str,
        *message_args: object,
        **context: Any,
    ) -> None:
        extra: dict[str, Any] = {"scan_event": event.value}
        for key, value in context.items():
            extra[key] = str(value) if isinstance(value, Path) else value
        logger.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["CueSource", "CuesheetScanService", "ScanEvent", "ScanResult"]
