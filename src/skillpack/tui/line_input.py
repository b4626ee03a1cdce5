"""Single-line prompts that read from the controlling terminal."""

from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.input import Input, create_input
from prompt_toolkit.output import Output


def read_line(message: str, *, input: Input | None = None, output: Output | None = None) -> str:
    """Read one line, preferring the tty over stdin like the selector does.

    Raises:
        KeyboardInterrupt: the user pressed Ctrl-C.
        EOFError: Ctrl-D on an empty line, or input ended.
    """
    session: PromptSession[str] = PromptSession(
        input=input if input is not None else create_input(always_prefer_tty=True),
        output=output,
    )
    return session.prompt(message)
