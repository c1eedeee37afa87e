"""Rich console handler for scan events.

Where: platform/logging/handlers.py
What: Turn records carrying ``scan_event`` extras into one coloured status line.
Why: Services log structured fields; only this module decides how they look.
"""

from __future__ import annotations

import logging
import sys
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, NamedTuple

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class _EventStyle(NamedTuple):
    icon: str
    color: str
    label: str


def _pure(raw: str) -> PurePath:
    return PureWindowsPath(raw) if "\\" in raw else PurePosixPath(raw)


def compact_path(path: str, base: str | None = None, keep: int = 4) -> str:
    """Shorten ``path`` for display.

    The path is made relative to ``base`` when it lies beneath it, and only
    the last ``keep`` components survive, behind an ellipsis.
    """
    shown = _pure(path)
    if base:
        try:
            relative = shown.relative_to(_pure(base))
        except ValueError:
            relative = None
        if relative is not None and relative.parts:
            shown = relative

    sep = "\\" if isinstance(shown, PureWindowsPath) else "/"
    parts = [p for p in shown.parts if p != shown.anchor]
    if len(parts) > keep:
        return "…" + sep + sep.join(parts[-keep:])
    head = shown.anchor.rstrip("\\/") + sep if shown.anchor else ""
    return (head + sep.join(parts)) or "."


class WhitePathRichHandler(RichHandler):
    """RichHandler that draws scan events with white paths and magenta separators."""

    _EVENTS: ClassVar[dict[str, _EventStyle]] = {
        "scan.file.start": _EventStyle("🎧", "blue", "Scanning"),
        "scan.file.complete": _EventStyle("🎉", "green", "Scanned"),
        "scan.file.none": _EventStyle("ℹ️", "yellow", "No cuesheet for"),
        "scan.file.error": _EventStyle("⛔", "red", "Failed"),
        "scan.sidecar.found": _EventStyle("📄", "magenta", "Sidecar"),
    }
    _FALLBACK: ClassVar[_EventStyle] = _EventStyle("ℹ️", "blue", "")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.update(
            show_time=False,
            show_path=False,
            show_level=False,
            markup=True,
            rich_tracebacks=True,
        )
        super().__init__(*args, **kwargs)

    @staticmethod
    def _path_text(display: str) -> Text:
        text = Text(style="white")
        for char in display:
            _ = text.append(char, style="magenta" if char in "/\\…" else None)
        return text

    @staticmethod
    def _details(event: str, record: logging.LogRecord) -> list[str]:
        if event == "scan.file.error":
            message = getattr(record, "error_message", None)
            return [str(message)] if message else []
        if event != "scan.file.complete":
            return []
        details: list[str] = []
        tracks = getattr(record, "tracks", None)
        if isinstance(tracks, int):
            details.append(f"tracks={tracks}")
        cue_source = getattr(record, "cue_source", None)
        if cue_source:
            details.append(f"source={cue_source}")
        return details

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "scan_event", None)
        if not isinstance(event, str):
            return super().render_message(record, message)

        style = self._EVENTS.get(event, self._FALLBACK)
        line = Text(f"{style.icon} ", style=f"bold {style.color}")
        body = Text(style=style.color)
        if style.label:
            _ = body.append(style.label + " ")

        source_path = getattr(record, "source_path", None)
        if source_path:
            display = compact_path(str(source_path), getattr(record, "base_path", None))
            _ = body.append_text(self._path_text(display))

        details = self._details(event, record)
        if details:
            _ = body.append(f" ({', '.join(details)})")
        return line.append_text(body)


__all__ = ["WhitePathRichHandler", "compact_path"]
