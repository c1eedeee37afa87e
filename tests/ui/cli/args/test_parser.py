"""Tests for command line argument parser."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from cuescan.platform.logging import DEFAULT_LOG_FILE
from cuescan.ui.cli.args import ArgumentParser, ScanArgs


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    """Keep argument processing from touching real log files."""

    config = mocker.patch("cuescan.ui.cli.args.parser.Config.load")
    config.return_value.log_file = None
    return mocker.patch("cuescan.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    parser = ArgumentParser.create_parser()

    args = parser.parse_args(["album.flac"])
    assert args.file_path == "album.flac"
    assert not args.json_output and not args.verbose and not args.quiet

    flagged = parser.parse_args(["album.flac", "--json", "--verbose"])
    assert flagged.json_output and flagged.verbose


def test_verbose_and_quiet_are_exclusive() -> None:
    parser = ArgumentParser.create_parser()
    with pytest.raises(SystemExit):
        _ = parser.parse_args(["album.flac", "--verbose", "--quiet"])


@pytest.mark.parametrize(
    ("flags", "level"),
    [([], logging.INFO), (["--verbose"], logging.DEBUG), (["--quiet"], logging.ERROR)],
)
def test_process_args_sets_console_level(
    tmp_path: Path, mock_setup_logger: MagicMock, flags: list[str], level: int
) -> None:
    media = tmp_path / "album.flac"
    media.touch()

    args = ArgumentParser.process_args([str(media), *flags])

    assert args == ScanArgs(
        file_path=media,
        json_output=False,
        verbose="--verbose" in flags,
        quiet="--quiet" in flags,
    )
    mock_setup_logger.assert_called_once_with(log_file=DEFAULT_LOG_FILE, console_level=level)


def test_process_args_uses_configured_log_file(tmp_path: Path, mocker: MockerFixture) -> None:
    media = tmp_path / "album.flac"
    media.touch()
    config = mocker.patch("cuescan.ui.cli.args.parser.Config.load")
    config.return_value.log_file = tmp_path / "custom.log"
    setup = mocker.patch("cuescan.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args([str(media)])

    setup.assert_called_once_with(log_file=tmp_path / "custom.log", console_level=logging.INFO)


def test_missing_file_exits(tmp_path: Path, mock_setup_logger: MagicMock) -> None:
    _ = mock_setup_logger
    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args([str(tmp_path / "missing.flac")])
    assert excinfo.value.code == 1
