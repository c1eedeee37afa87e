"""Tests for the quote-aware cuesheet tokenizer."""

from cuescan.features.cuesheet.usecases.tokenizer import (
    is_upper_word,
    quoted_token_end,
    read_token,
    unquote,
)


def test_read_token_splits_on_whitespace() -> None:
    token, rest = read_token("  TRACK 01 AUDIO")
    assert token == "TRACK"
    assert rest == "01 AUDIO"


def test_read_token_returns_none_for_blank_input() -> None:
    assert read_token("") == (None, "")
    assert read_token(" \t\r\n") == (None, "")


def test_read_token_keeps_quoted_token_raw() -> None:
    token, rest = read_token('"Song One" extra words')
    assert token == '"Song One"'
    assert rest == "extra words"


def test_quoted_token_round_trip() -> None:
    """Escaped quotes survive tokenizing and decode to literal quotes."""

    token, rest = read_token('"a \\"quoted\\" value" rest')
    assert unquote(token) == 'a "quoted" value'
    assert rest == "rest"


def test_unterminated_quote_extends_to_end_of_line() -> None:
    token, rest = read_token('"never closed here')
    assert token == '"never closed here'
    assert rest == ""
    assert unquote(token) == "never closed here"


def test_quoted_token_end_points_past_closing_quote() -> None:
    assert quoted_token_end('"KEY"=value', 0) == 5
    assert quoted_token_end('"open', 0) == 5


def test_unquote_handles_bare_and_missing_tokens() -> None:
    assert unquote(None) is None
    assert unquote("bare") == "bare"
    assert unquote('""') == ""
    assert unquote('"stop"here') == "stop"


def test_is_upper_word() -> None:
    assert is_upper_word("GENRE")
    assert not is_upper_word("Genre")
    assert not is_upper_word("REPLAYGAIN_TRACK_GAIN")
    assert not is_upper_word("")
