"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from cpdf.config.paths import default_log_file
from cpdf.ui.cli.args import ArgumentParser, CLIArgs


def test_create_parser() -> None:
    """Short and long flags should map onto the same destinations."""

    parser = ArgumentParser.create_parser()

    short: Namespace = parser.parse_args(["-c", "-m", "-v"])
    assert short.compress and short.merge and short.version

    long: Namespace = parser.parse_args(["--compress", "--merge", "--version", "--verbose"])
    assert long.compress and long.merge and long.version and long.verbose

    empty: Namespace = parser.parse_args([])
    assert not (empty.compress or empty.merge or empty.version or empty.verbose)


def test_process_args_configures_logging(mocker: MockerFixture) -> None:
    """Plain runs load the config and log to the default file at INFO."""

    mock_setup_logger = mocker.patch("cpdf.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["-m"])

    assert args == CLIArgs(merge=True)
    assert not args.interactive
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] == default_log_file()


def test_process_args_verbose_uses_debug(mocker: MockerFixture) -> None:
    mock_setup_logger = mocker.patch("cpdf.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["--verbose"])

    assert args.interactive
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_process_args_uses_configured_log_file(mocker: MockerFixture, tmp_path: Path) -> None:
    mock_config = mocker.patch("cpdf.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = tmp_path / "custom.log"
    mock_setup_logger = mocker.patch("cpdf.ui.cli.args.parser.setup_logger")

    _ = ArgumentParser.process_args([])

    assert mock_setup_logger.call_args.kwargs["log_file"] == tmp_path / "custom.log"


def test_version_short_circuits_config_and_logging(mocker: MockerFixture) -> None:
    """``-v`` wins over every other flag, even unknown ones."""

    mock_config = mocker.patch("cpdf.ui.cli.args.parser.Config")
    mock_setup_logger = mocker.patch("cpdf.ui.cli.args.parser.setup_logger")

    args = ArgumentParser.process_args(["-c", "-v", "--bogus"])

    assert args.version and args.compress
    mock_config.load.assert_not_called()
    mock_setup_logger.assert_not_called()


def test_unknown_arguments_without_version_exit(mocker: MockerFixture) -> None:
    _ = mocker.patch("cpdf.ui.cli.args.parser.setup_logger")

    with pytest.raises(SystemExit) as excinfo:
        _ = ArgumentParser.process_args(["--bogus"])

    assert excinfo.value.code == 2


def test_unwritable_log_dir_falls_back_to_console(
    isolated_app_dirs: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    blocker = isolated_app_dirs / "f"
    _ = blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setenv("CPDF_DATA_DIR", str(blocker / "x"))

    args = ArgumentParser.process_args(["-m"])

    assert args == CLIArgs(merge=True)
    handlers = logging.getLogger("cpdf").handlers
    assert not any(isinstance(h, logging.FileHandler) for h in handlers)
