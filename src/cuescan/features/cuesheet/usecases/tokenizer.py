"""Cuesheet line tokenizer.

Where: src/cuescan/features/cuesheet/usecases/tokenizer.py
What: Split cuesheet lines into whitespace-delimited, quote-aware tokens.
Why: The directive grammar is forgiving, so tokenizing never raises.
"""

from __future__ import annotations

from typing import Final

WHITESPACE: Final[str] = " \t\r\n"
QUOTE: Final[str] = '"'
ESCAPE: Final[str] = "\\"


def skip_whitespace(text: str, pos: int = 0) -> int:
    """Return the index of the first non-whitespace character at or after ``pos``."""
    length = len(text)
    while pos < length and text[pos] in WHITESPACE:
        pos += 1
    return pos


def quoted_token_end(text: str, start: int) -> int:
    """Return the index just past the closing quote of the token at ``start``.

    ``text[start]`` must be the opening quote. A backslash escapes the next
    character. Without a closing quote the end of ``text`` is returned.
    """
    pos = start + 1
    length = len(text)
    while pos < length and text[pos] != QUOTE:
        if text[pos] == ESCAPE:
            pos += 1
        if pos < length:
            pos += 1
    if pos < length:
        pos += 1
    return min(pos, length)


def read_token(text: str) -> tuple[str | None, str]:
    """Read the next token from ``text``.

    Args:
        text: Remaining line content.

    Returns:
        tuple: ``(token, remainder)``. The token is returned raw, so a quoted
        token keeps its quotes and escapes. The remainder has its leading
        whitespace removed. ``token`` is ``None`` when only whitespace is left.
    """
    start = skip_whitespace(text)
    if start >= len(text):
        return None, ""

    if text[start] == QUOTE:
        end = quoted_token_end(text, start)
    else:
        end = start
        while end < len(text) and text[end] not in WHITESPACE:
            end += 1

    return text[start:end], text[skip_whitespace(text, end):]


def unquote(quoted: str | None) -> str | None:
    """Strip one layer of quotes and resolve backslash escapes.

    Copying stops at the first unescaped quote after the optional opening one.
    """
    if quoted is None:
        return None

    pos = 1 if quoted.startswith(QUOTE) else 0
    length = len(quoted)
    chars: list[str] = []
    while pos < length and quoted[pos] != QUOTE:
        if quoted[pos] == ESCAPE:
            pos += 1
        if pos < length:
            chars.append(quoted[pos])
            pos += 1
    return "".join(chars)


def is_upper_word(token: str) -> bool:
    """Return whether every character of ``token`` is an ASCII uppercase letter."""
    return bool(token) and all("A" <= char <= "Z" for char in token)


__all__ = [
    "is_upper_word",
    "quoted_token_end",
    "read_token",
    "skip_whitespace",
    "unquote",
]
