"""Tests for the tty-preferring line reader."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from skillpack.cli.prompts import make_destination_prompt
from skillpack.reporting import Console
from skillpack.tui import read_line


def test_read_line_returns_typed_text() -> None:
    with create_pipe_input() as pipe_input:
        pipe_input.send_text("my-project\r")
        assert read_line("Path: ", input=pipe_input, output=DummyOutput()) == "my-project"


def test_read_line_ctrl_c_raises_keyboard_interrupt() -> None:
    with create_pipe_input() as pipe_input:
        pipe_input.send_text("\x03")
        with pytest.raises(KeyboardInterrupt):
            read_line("Path: ", input=pipe_input, output=DummyOutput())


def test_read_line_ctrl_d_raises_eof() -> None:
    with create_pipe_input() as pipe_input:
        pipe_input.send_text("\x04")
        with pytest.raises(EOFError):
            read_line("Path: ", input=pipe_input, output=DummyOutput())


def test_destination_prompt_reads_from_terminal_by_default(tmp_path: Path) -> None:
    tty_input = object()
    session = MagicMock()
    session.return_value.prompt.return_value = "y"

    with (
        patch("skillpack.tui.line_input.create_input", return_value=tty_input) as create_input,
        patch("skillpack.tui.line_input.PromptSession", session),
    ):
        confirm = make_destination_prompt(".opencode/skills", console=Console(color=False, write=lambda _: None))
        chosen = confirm(tmp_path / ".opencode" / "skills")

    assert chosen == tmp_path / ".opencode" / "skills"
    create_input.assert_called_once_with(always_prefer_tty=True)
    assert session.call_args.kwargs["input"] is tty_input
