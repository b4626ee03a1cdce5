"""Formatted-text rendering of a :class:`SelectionState`."""

from __future__ import annotations

from typing import TypeAlias

from skillpack.constants.selector import (
    CURSOR_GLYPH,
    DESCRIPTION_DISPLAY_WIDTH,
    ELLIPSIS,
    FILTER_CARET,
    MULTI_HINT,
    SELECTED_GLYPH,
    SINGLE_HINT,
    UNSELECTED_GLYPH,
)
from skillpack.tui.state import SelectionState

Fragments: TypeAlias = list[tuple[str, str]]


def truncate(text: str, width: int = DESCRIPTION_DISPLAY_WIDTH) -> str:
    """Shorten *text* to *width* characters for display, single line."""
    flat = " ".join(text.split())
    if len(flat) <= width:
        return flat
    return flat[: max(0, width - len(ELLIPSIS))] + ELLIPSIS


def render_fragments(state: SelectionState, *, title: str | None = None) -> Fragments:
    """Render the search bar, key hints, visible items and selection footer."""
    fragments: Fragments = []
    if title:
        fragments.append(("class:title", f"  {title}\n"))

    fragments.extend(
        [
            ("class:search-label", "  Search: "),
            ("class:search-text", state.filter_text),
            ("class:caret", f"{FILTER_CARET}\n"),
            ("class:hint", f"  {MULTI_HINT if state.multi else SINGLE_HINT}\n"),
        ]
    )

    visible = state.visible_indices
    if not visible:
        fragments.append(("class:empty", "    no matches\n"))

    current = state.current_index
    for index in visible:
        item = state.items[index]
        is_current = index == current
        fragments.append(("class:cursor", f"  {CURSOR_GLYPH} ") if is_current else ("", "    "))
        if state.multi:
            if index in state.selected:
                fragments.append(("class:selected-box", f"{SELECTED_GLYPH} "))
            else:
                fragments.append(("class:unselected-box", f"{UNSELECTED_GLYPH} "))
        fragments.append(("class:item-current" if is_current else "class:item", item.label))
        if item.description:
            fragments.append(("class:description", f"  {truncate(item.description)}"))
        fragments.append(("", "\n"))

    if state.multi and state.selected:
        names = ", ".join(state.items[index].label for index in sorted(state.selected))
        fragments.append(("", "\n"))
        fragments.append(("class:footer-label", "  Selected: "))
        fragments.append(("", f"{names}\n"))

    return fragments

