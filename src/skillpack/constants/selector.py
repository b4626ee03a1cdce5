"""Key names, glyphs and layout for the interactive selector."""

from __future__ import annotations

KEY_UP: str = "up"
KEY_DOWN: str = "down"
KEY_SPACE: str = "space"
KEY_ENTER: str = "enter"
KEY_BACKSPACE: str = "backspace"
KEY_INTERRUPT: str = "interrupt"
SELECT_ALL_KEYS: frozenset[str] = frozenset({"a", "A"})

CURSOR_GLYPH: str = "›"
SELECTED_GLYPH: str = "◆"
UNSELECTED_GLYPH: str = "◇"
FILTER_CARET: str = "▌"

DESCRIPTION_DISPLAY_WIDTH: int = 55
ELLIPSIS: str = "…"

MULTI_HINT: str = "↑↓ move · space select · enter confirm · a all · type to filter"
SINGLE_HINT: str = "↑↓ move · enter confirm · type to filter"

SELECTOR_STYLE: dict[str, str] = {
    "search-label": "#888888",
    "search-text": "#ffffff",
    "caret": "#00afaf",
    "hint": "#888888",
    "cursor": "#00afaf bold",
    "item": "#ffffff",
    "item-current": "#ffffff bold",
    "description": "#888888",
    "selected-box": "#00af00",
    "unselected-box": "#888888",
    "footer-label": "#00af00",
    "empty": "#af8700",
}
