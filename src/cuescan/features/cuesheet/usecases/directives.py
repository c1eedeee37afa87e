"""Text cuesheet directive dispatcher.

Where: src/cuescan/features/cuesheet/usecases/directives.py
What: Walk a cuesheet line by line and fold its directives into album and track records.
Why: Text cuesheets (sidecar files or CUESHEET tags) feed the same track table as embedded metadata.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import ClassVar, Final, final

from cuescan.platform.logging import logger
from cuescan.shared.track_record import TrackRecord

from ..domain.timing import (
    derive_span,
    finalize_last_track,
    msf_to_sample_offset,
    parse_leading_int,
)
from ..domain.track_table import MAX_TRACK_NUMBER, CuesheetResult, TrackTable
from .metadata_keys import parse_u32, resolve_metadata
from .tokenizer import (
    QUOTE,
    WHITESPACE,
    is_upper_word,
    quoted_token_end,
    read_token,
    unquote,
)

SOUNDING_INDEX: Final[int] = 1


@dataclass(frozen=True, slots=True)
class ParseState:
    """Cursor of the directive state machine.

    ``track`` is 0 while still in album scope.
    """

    track: int = 0
    seen_first_index: bool = False


DirectiveHandler = Callable[["CuesheetParser", ParseState, str], ParseState]


@final
class CuesheetParser:
    """Single-use parser folding one cuesheet into ``album`` and a track table."""

    IGNORED_DIRECTIVES: ClassVar[frozenset[str]] = frozenset(
        {"CATALOG", "CDTEXTFILE", "FILE", "ISRC", "POSTGAP", "PREGAP"}
    )
    IGNORED_REM_KEYS: ClassVar[frozenset[str]] = frozenset({"DISCID"})

    def __init__(self, album: TrackRecord, table: TrackTable | None = None) -> None:
        self.album = album
        self.table = table if table is not None else TrackTable()

    # -- helpers ---------------------------------------------------------

    def _scope(self, state: ParseState) -> TrackRecord:
        """Record targeted by descriptive directives in the current state."""
        if state.track:
            return self.table.track(state.track)
        return self.album

    # -- directive handlers ----------------------------------------------

    def _handle_flags(self, state: ParseState, rest: str) -> ParseState:
        token, rest = read_token(rest)
        while token is not None:
            if token.upper() == "DATA" and state.track:
                self.table.track(state.track).disabled = True
                break
            token, rest = read_token(rest)
        return state

    def _handle_index(self, state: ParseState, rest: str) -> ParseState:
        # Like CD players, only INDEX 01 starts a track; pregaps are skipped.
        if not state.track or state.seen_first_index:
            return state

        number, rest = read_token(rest)
        if number is None or parse_leading_int(number) != SOUNDING_INDEX:
            return state

        state = replace(state, seen_first_index=True)
        timecode, _ = read_token(rest)
        if timecode is None:
            return state

        track = self.table.track(state.track)
        track.subtrack = True
        offset = msf_to_sample_offset(timecode, self.album.samplerate)
        if offset is None:
            logger.debug("Malformed timecode %r for track %d", timecode, state.track)
        else:
            track.sample_offset = offset

        if state.track > 1:
            previous = self.table.track(state.track - 1)
            if previous.track_number:
                derive_span(
                    previous,
                    track.sample_offset,
                    self.album.samplerate,
                    start_offset=self.table.span_start(state.track - 1),
                )
        return state

    def _handle_performer(self, state: ParseState, rest: str) -> ParseState:
        token, _ = read_token(rest)
        value = unquote(token)
        if value is None:
            return state
        if state.track:
            _ = self.table.track(state.track).assign_once("artist", value)
        else:
            _ = self.album.assign_once("artist", value)
            _ = self.album.assign_once("album_artist", value)
        return state

    def _handle_songwriter(self, state: ParseState, rest: str) -> ParseState:
        token, _ = read_token(rest)
        value = unquote(token)
        if value is not None:
            _ = self._scope(state).assign_once("composer", value)
        return state

    def _handle_title(self, state: ParseState, rest: str) -> ParseState:
        token, _ = read_token(rest)
        value = unquote(token)
        if value is None:
            return state
        field_name = "title" if state.track else "album"
        _ = self._scope(state).assign_once(field_name, value)
        return state

    def _handle_track(self, state: ParseState, rest: str) -> ParseState:
        token, _ = read_token(rest)
        if token is None:
            return state

        number = parse_leading_int(token)
        if not 1 <= number <= MAX_TRACK_NUMBER:
            logger.warning("Ignoring TRACK with invalid number %r", token)
            return state

        _ = self.table.ensure(number)
        record = self.table.track(number)
        if not record.track_number:
            record.track_number = number
        return ParseState(track=number, seen_first_index=False)

    def _handle_rem(self, state: ParseState, rest: str) -> ParseState:
        token, remainder = read_token(rest)
        if token is None:
            return state

        if is_upper_word(token):
            scope = self._scope(state)
            if token == "COMMENT":
                if remainder:
                    _ = scope.assign_once("comment", remainder)
            elif token == "GENRE":
                if remainder:
                    _ = scope.assign_once("genre", remainder)
            elif token == "DATE":
                _ = scope.assign_once("year", parse_u32(remainder))
            elif token in self.IGNORED_REM_KEYS:
                pass
            else:
                self._apply_rem_key(scope, token, remainder)
        elif token.startswith(QUOTE):
            self._apply_quoted_rem_key(self._scope(state), rest)
        return state

    def _apply_rem_key(self, scope: TrackRecord, first: str, remainder: str) -> None:
        """Treat a run of all-caps words as a tag key, the rest as its value."""
        key_parts = [first]
        value: str | None = None
        token, rest = read_token(remainder)
        while token is not None:
            if not is_upper_word(token):
                # Value starts at this token; keep its inner spacing verbatim.
                value = remainder
                break
            key_parts.append(token)
            remainder = rest
            token, rest = read_token(remainder)

        key = " ".join(key_parts)
        if value is None:
            logger.debug("REM %s carries no value; ignored", key)
            return
        _ = resolve_metadata(scope, key, value)

    def _apply_quoted_rem_key(self, scope: TrackRecord, rest: str) -> None:
        """Handle ``REM "KEY"=VALUE`` and ``REM "KEY" VALUE``."""
        end = quoted_token_end(rest, 0)
        if end < 2 or rest[end - 1] != QUOTE or end >= len(rest) or rest[end] not in " =":
            logger.debug("Malformed quoted REM key in %r", rest)
            return

        key = unquote(rest[:end])
        if not key:
            return
        _ = resolve_metadata(scope, key, rest[end + 1 :].lstrip(WHITESPACE))

    HANDLERS: ClassVar[dict[str, DirectiveHandler]] = {
        "FLAGS": _handle_flags,
        "INDEX": _handle_index,
        "PERFORMER": _handle_performer,
        "REM": _handle_rem,
        "SONGWRITER": _handle_songwriter,
        "TITLE": _handle_title,
        "TRACK": _handle_track,
    }

    # -- driver ----------------------------------------------------------

    def feed_line(self, state: ParseState, line: str) -> ParseState:
        """Dispatch a single line and return the updated state."""
        directive, rest = read_token(line)
        if directive is None:
            return state

        name = directive.upper()
        if name in self.IGNORED_DIRECTIVES:
            return state

        handler = self.HANDLERS.get(name)
        if handler is None:
            logger.warning("Unrecognized cuesheet directive %s", directive)
            return state
        return handler(self, state, rest.rstrip(WHITESPACE))

    def parse(self, text: str) -> CuesheetResult:
        """Parse the whole cuesheet ``text``."""
        state = ParseState()
        # Only LF ends a line; CR is trailing whitespace, other breaks are text.
        for line in text.split("\n"):
            state = self.feed_line(state, line)

        last_number = len(self.table)
        if last_number and self.table.track(last_number).track_number:
            _ = finalize_last_track(
                self.table.track(last_number),
                self.album,
                start_offset=self.table.span_start(last_number),
            )

        logger.debug("Parsed cuesheet with %d track(s)", len(self.table))
        return CuesheetResult(album=self.album, tracks=self.table.records())


def decode_cuesheet(data: bytes) -> str:
    """Decode cuesheet bytes as UTF-8 (BOM tolerated), replacing invalid sequences."""
    return data.decode("utf-8-sig", errors="replace")


def parse_cuesheet(
    cuesheet: str | bytes,
    album: TrackRecord,
    table: TrackTable | None = None,
) -> CuesheetResult:
    """Parse a text cuesheet into ``album`` (mutated in place) and a track list.

    Args:
        cuesheet: Full cuesheet text, or raw bytes decoded as UTF-8.
        album: Album record, possibly pre-populated from container tags.
        table: Optional table to extend instead of starting empty.

    Returns:
        CuesheetResult: The album record and the tracks found (possibly none).
    """
    text = decode_cuesheet(cuesheet) if isinstance(cuesheet, bytes) else cuesheet
    return CuesheetParser(album, table).parse(text)


__all__ = [
    "CuesheetParser",
    "ParseState",
    "decode_cuesheet",
    "parse_cuesheet",
]
