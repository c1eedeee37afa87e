"""
Summary: Locate and decode the sidecar cuesheet of a media file.
Why: Standalone .cue files arrive in assorted legacy encodings and two naming conventions.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

import chardet

from cuescan.config.settings import DETECT_ENCODING, SIDECAR_ENCODINGS
from cuescan.platform.logging import logger

from ..usecases.ports import SidecarCuesheet

CUE_SUFFIX = ".cue"
FALLBACK_ENCODING = "latin-1"


def sidecar_candidates(file_path: Path) -> list[Path]:
    """Return sidecar paths in lookup order.

    ``album.flac`` yields ``album.cue`` then ``album.flac.cue``.
    """
    candidates: list[Path] = []
    if file_path.suffix:
        candidates.append(file_path.with_suffix(CUE_SUFFIX))
    appended = file_path.with_name(file_path.name + CUE_SUFFIX)
    if appended not in candidates:
        candidates.append(appended)
    return candidates


def decode_bytes(
    data: bytes,
    encodings: Sequence[str],
    *,
    detect_encoding: bool = True,
) -> tuple[str, str]:
    """Decode ``data`` with the first encoding that fits.

    Returns:
        tuple: ``(text, encoding_used)``.
    """
    for encoding in encodings:
        try:
            return data.decode(encoding), encoding
        except UnicodeDecodeError:
            continue

    if detect_encoding:
        detected = chardet.detect(data)
        encoding = detected.get("encoding")
        if encoding:
            try:
                return data.decode(encoding), encoding
            except (UnicodeDecodeError, LookupError):
                logger.debug("Detected encoding %s did not decode sidecar", encoding)

    return data.decode(FALLBACK_ENCODING), FALLBACK_ENCODING


@final
class SidecarReader:
    """Filesystem-backed sidecar lookup."""

    def __init__(
        self,
        encodings: Sequence[str] | None = None,
        *,
        detect_encoding: bool | None = None,
    ) -> None:
        self.encodings: tuple[str, ...] = tuple(encodings) if encodings is not None else SIDECAR_ENCODINGS
        self.detect_encoding: bool = DETECT_ENCODING if detect_encoding is None else detect_encoding

    def locate(self, file_path: Path) -> Path | None:
        for candidate in sidecar_candidates(file_path):
            if candidate.is_file():
                return candidate
        return None

    def read(self, file_path: Path) -> SidecarCuesheet | None:
        """Read the first sidecar cuesheet next to ``file_path``."""
        cue_path = self.locate(file_path)
        if cue_path is None:
            return None

        try:
            data = cue_path.read_bytes()
        except OSError as exc:
            logger.warning("Failed to read sidecar cuesheet %s: %s", cue_path, exc)
            return None

        text, encoding = decode_bytes(data, self.encodings, detect_encoding=self.detect_encoding)
        logger.debug("Decoded sidecar %s as %s", cue_path, encoding)
        return SidecarCuesheet(path=cue_path, text=text, encoding=encoding)


__all__ = ["SidecarReader", "decode_bytes", "sidecar_candidates"]
