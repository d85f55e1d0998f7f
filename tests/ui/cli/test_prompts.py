"""Tests for the Rich-backed prompt session."""

from __future__ import annotations

from io import StringIO
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture
from rich.console import Console

from cpdf.exceptions import PromptAbortedError
from cpdf.ui.cli.prompts import RichPromptSession, parse_multi_selection


@pytest.fixture
def session() -> RichPromptSession:
    return RichPromptSession(Console(file=StringIO(), force_terminal=False))


@pytest.fixture
def mock_prompt_ask(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("cpdf.ui.cli.prompts.Prompt.ask")


def _output(session: RichPromptSession) -> str:
    file = session.console.file
    assert isinstance(file, StringIO)
    return file.getvalue()


def test_parse_multi_selection_keeps_typed_order() -> None:
    assert parse_multi_selection("3, 1 2", 3) == [2, 0, 1]
    assert parse_multi_selection("2,2 1", 3) == [1, 0]
    assert parse_multi_selection("   ", 3) == []


@pytest.mark.parametrize("raw", ["0", "4", "a", "1-2"])
def test_parse_multi_selection_rejects_bad_tokens(raw: str) -> None:
    with pytest.raises(ValueError):
        _ = parse_multi_selection(raw, 3)


def test_select_returns_option_for_number(
    session: RichPromptSession, mock_prompt_ask: MagicMock
) -> None:
    mock_prompt_ask.return_value = "2"

    answer = session.select("Pick one", ["a.pdf", "b.pdf"])

    assert answer == "b.pdf"
    assert mock_prompt_ask.call_args.kwargs["choices"] == ["1", "2"]
    assert "b.pdf" in _output(session)


def test_select_empty_options_is_an_error(session: RichPromptSession) -> None:
    with pytest.raises(ValueError):
        _ = session.select("Pick one", [])


def test_multi_select_reprompts_on_invalid_answer(
    session: RichPromptSession, mock_prompt_ask: MagicMock
) -> None:
    mock_prompt_ask.side_effect = ["9", "2 1"]

    picked = session.multi_select("Pick many", ["a.pdf", "b.pdf"])

    assert picked == ["b.pdf", "a.pdf"]
    assert mock_prompt_ask.call_count == 2
    assert "not a number between 1 and 2" in _output(session)


def test_multi_select_blank_answer_selects_nothing(
    session: RichPromptSession, mock_prompt_ask: MagicMock
) -> None:
    mock_prompt_ask.return_value = ""

    assert session.multi_select("Pick many", ["a.pdf"]) == []


def test_text_passes_default(session: RichPromptSession, mock_prompt_ask: MagicMock) -> None:
    mock_prompt_ask.return_value = "merged.pdf"

    assert session.text("Output", default="merged.pdf") == "merged.pdf"
    assert mock_prompt_ask.call_args.kwargs["default"] == "merged.pdf"


def test_confirm_defaults_to_no(session: RichPromptSession, mocker: MockerFixture) -> None:
    mock_confirm = mocker.patch("cpdf.ui.cli.prompts.Confirm.ask", return_value=False)

    assert session.confirm("Overwrite?") is False
    assert mock_confirm.call_args.kwargs["default"] is False


def test_end_of_input_is_fatal(session: RichPromptSession, mock_prompt_ask: MagicMock) -> None:
    mock_prompt_ask.side_effect = EOFError

    with pytest.raises(PromptAbortedError, match="Output"):
        _ = session.text("Output", default="x.pdf")


def test_keyboard_interrupt_propagates(
    session: RichPromptSession, mock_prompt_ask: MagicMock
) -> None:
    mock_prompt_ask.side_effect = KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        _ = session.select("Pick one", ["a.pdf"])
