"""Step-by-step console output used by the installer and scaffolder."""

from __future__ import annotations

from collections.abc import Callable

from skillpack.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GRAY,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    STEP_DONE_GLYPH,
    STEP_ERROR_GLYPH,
    STEP_INFO_GLYPH,
    STEP_PENDING_GLYPH,
    STEP_WARN_GLYPH,
)


class Console:
    """Writes timeline-style progress lines, optionally coloured."""

    def __init__(self, *, color: bool = True, write: Callable[[str], object] = print) -> None:
        self._color = color
        self._write = write

    def paint(self, text: str, *codes: str) -> str:
        if not self._color or not codes:
            return text
        return f"{''.join(codes)}{text}{ANSI_RESET}"

    def highlight(self, text: str) -> str:
        return self.paint(text, ANSI_CYAN, ANSI_BOLD)

    def line(self, text: str = "") -> None:
        self._write(text)

    def pending(self, text: str) -> None:
        self._write(f"  {self.paint(STEP_PENDING_GLYPH, ANSI_GRAY)}  {text}")

    def done(self, text: str) -> None:
        self._write(f"  {self.paint(STEP_DONE_GLYPH, ANSI_GREEN)}  {text}")

    def ask(self, text: str) -> None:
        self._write(f"  {self.paint(STEP_DONE_GLYPH, ANSI_YELLOW)}  {self.paint(text, ANSI_BOLD)}")

    def info(self, text: str) -> None:
        self._write(f"  {self.paint(STEP_INFO_GLYPH, ANSI_GRAY)}  {self.paint(text, ANSI_DIM)}")

    def warn(self, text: str) -> None:
        self._write(f"  {self.paint(STEP_WARN_GLYPH, ANSI_YELLOW)}  {text}")

    def error(self, text: str) -> None:
        self._write(f"  {self.paint(STEP_ERROR_GLYPH, ANSI_RED)}  {text}")
