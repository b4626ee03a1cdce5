"""Selection state machine behind the interactive selector.

The state knows nothing about terminals or skills: it holds labeled items,
a filter string, a cursor and the selected indices, and reacts to abstract
key names. The terminal driver in :mod:`skillpack.tui.selector` forwards
key presses here and renders whatever the state says.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

from skillpack.constants.selector import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_INTERRUPT,
    KEY_SPACE,
    KEY_UP,
    SELECT_ALL_KEYS,
)


class SelectorPhase(enum.Enum):
    IDLE = "idle"
    RENDERING = "rendering"
    AWAITING_KEY = "awaiting_key"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


TERMINAL_PHASES: frozenset[SelectorPhase] = frozenset({SelectorPhase.CONFIRMED, SelectorPhase.CANCELLED})


@dataclass(frozen=True)
class SelectItem:
    """One selectable entry."""

    label: str
    description: str = ""

    def matches(self, needle: str) -> bool:
        """Case-insensitive substring match on label or description."""
        if not needle:
            return True
        folded = needle.casefold()
        return folded in self.label.casefold() or folded in self.description.casefold()


@dataclass
class SelectionState:
    """Cursor, filter and selection for one selector invocation."""

    items: Sequence[SelectItem]
    multi: bool = False
    cursor: int = 0
    filter_text: str = ""
    selected: set[int] = field(default_factory=set)
    phase: SelectorPhase = SelectorPhase.IDLE

    @property
    def visible_indices(self) -> list[int]:
        """Original indices of items passing the current filter."""
        return [index for index, item in enumerate(self.items) if item.matches(self.filter_text)]

    @property
    def current_index(self) -> int | None:
        """Original index of the item under the cursor, if any is visible."""
        visible = self.visible_indices
        if not visible:
            return None
        return visible[self._clamped_cursor(len(visible))]

    @property
    def finished(self) -> bool:
        return self.phase in TERMINAL_PHASES

    def begin_render(self) -> None:
        self.cursor = self._clamped_cursor(len(self.visible_indices))
        self.phase = SelectorPhase.RENDERING

    def end_render(self) -> None:
        if not self.finished:
            self.phase = SelectorPhase.AWAITING_KEY

    def handle_key(self, key: str) -> None:
        """Apply one key event.

        *key* is one of the ``KEY_*`` names or a single printable character.
        Keys arriving after a terminal phase are ignored.
        """
        if self.finished:
            return
        if key == KEY_INTERRUPT:
            self.cancel()
        elif key == KEY_UP:
            self.move(-1)
        elif key == KEY_DOWN:
            self.move(1)
        elif key == KEY_ENTER:
            self.confirm()
        elif key == KEY_BACKSPACE:
            self.backspace()
        elif key == KEY_SPACE:
            if self.multi:
                self.toggle_current()
            else:
                self.type_text(" ")
        elif self.multi and key in SELECT_ALL_KEYS and not self.filter_text:
            self.select_all()
        elif len(key) == 1 and key.isprintable():
            self.type_text(key)

    def move(self, delta: int) -> None:
        count = len(self.visible_indices)
        if count == 0:
            self.cursor = 0
            return
        self.cursor = max(0, min(count - 1, self._clamped_cursor(count) + delta))

    def toggle_current(self) -> None:
        index = self.current_index
        if index is None:
            return
        if index in self.selected:
            self.selected.discard(index)
        else:
            self.selected.add(index)

    def select_all(self) -> None:
        self.selected = set(range(len(self.items)))

    def type_text(self, text: str) -> None:
        self.filter_text += text
        self.cursor = 0

    def backspace(self) -> None:
        if not self.filter_text:
            return
        self.filter_text = self.filter_text[:-1]
        self.cursor = 0

    def confirm(self) -> None:
        current = self.current_index
        if self.multi:
            if not self.selected and current is not None:
                self.selected.add(current)
        else:
            self.selected = {current} if current is not None else set()
        self.phase = SelectorPhase.CONFIRMED

    def cancel(self) -> None:
        self.selected = set()
        self.phase = SelectorPhase.CANCELLED

    def result(self) -> tuple[int, ...]:
        """Selected indices in original list order; empty unless confirmed."""
        if self.phase is not SelectorPhase.CONFIRMED:
            return ()
        return tuple(sorted(self.selected))

    def _clamped_cursor(self, count: int) -> int:
        if count == 0:
            return 0
        return max(0, min(self.cursor, count - 1))
