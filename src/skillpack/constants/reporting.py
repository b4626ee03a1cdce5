"""Constants for stdout formatting."""

from __future__ import annotations

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"
ANSI_GRAY: str = "\033[90m"

STATUS_OK: str = "ok"
STATUS_WARN: str = "warn"
STATUS_FAIL: str = "fail"

STATUS_COLORS: dict[str, str] = {
    STATUS_OK: ANSI_GREEN,
    STATUS_WARN: ANSI_YELLOW,
    STATUS_FAIL: ANSI_RED,
}

SEVERITY_LABELS: dict[str, str] = {
    "error": "error",
    "warning": "warn ",
}

SEVERITY_COLORS: dict[str, str] = {
    "error": ANSI_RED,
    "warning": ANSI_YELLOW,
}

STEP_DONE_GLYPH: str = "◆"
STEP_PENDING_GLYPH: str = "◇"
STEP_WARN_GLYPH: str = "!"
STEP_ERROR_GLYPH: str = "✗"
STEP_INFO_GLYPH: str = "|"
