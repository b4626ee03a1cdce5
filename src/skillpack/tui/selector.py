"""Terminal driver for the interactive selector, built on prompt_toolkit.

prompt_toolkit owns raw input mode and cursor visibility for the lifetime of
the application and restores both on every exit path, including the
interrupt path where the application exits with ``KeyboardInterrupt``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from prompt_toolkit.application import Application
from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.output import Output
from prompt_toolkit.styles import Style

from skillpack.constants.selector import (
    KEY_BACKSPACE,
    KEY_DOWN,
    KEY_ENTER,
    KEY_INTERRUPT,
    KEY_SPACE,
    KEY_UP,
    SELECTOR_STYLE,
)
from skillpack.tui.render import Fragments, render_fragments
from skillpack.tui.state import SelectionState, SelectItem, SelectorPhase


class Selector(Protocol):
    """Callable contract the installer uses to ask the user to pick items."""

    def __call__(
        self,
        items: Sequence[SelectItem],
        *,
        multi: bool,
        title: str | None = None,
    ) -> tuple[int, ...]: ...


def build_selector_application(
    state: SelectionState,
    *,
    title: str | None = None,
    input: Input | None = None,
    output: Output | None = None,
) -> Application[tuple[int, ...]]:
    """Wire *state* to an inline prompt_toolkit application."""
    kb = KeyBindings()

    def _dispatch(event: KeyPressEvent, key: str) -> None:
        state.handle_key(key)
        if state.phase is SelectorPhase.CONFIRMED:
            event.app.exit(result=state.result())
        elif state.phase is SelectorPhase.CANCELLED:
            event.app.exit(exception=KeyboardInterrupt, style="class:aborting")

    _bind(kb, ("up",), lambda event: _dispatch(event, KEY_UP))
    _bind(kb, ("down",), lambda event: _dispatch(event, KEY_DOWN))
    _bind(kb, ("space",), lambda event: _dispatch(event, KEY_SPACE))
    _bind(kb, ("enter",), lambda event: _dispatch(event, KEY_ENTER))
    _bind(kb, ("backspace",), lambda event: _dispatch(event, KEY_BACKSPACE))
    _bind(kb, ("c-c", "c-d"), lambda event: _dispatch(event, KEY_INTERRUPT))

    @kb.add(Keys.Any)
    def _typed(event: KeyPressEvent) -> None:
        if len(event.data) == 1 and event.data.isprintable():
            _dispatch(event, event.data)

    def _get_text() -> Fragments:
        state.begin_render()
        fragments = render_fragments(state, title=title)
        state.end_render()
        return fragments

    control = FormattedTextControl(_get_text, focusable=True)
    window = Window(content=control, dont_extend_height=True, always_hide_cursor=True)

    return Application(
        layout=Layout(HSplit([window])),
        key_bindings=kb,
        style=Style.from_dict(SELECTOR_STYLE),
        full_screen=False,
        mouse_support=False,
        input=input,
        output=output,
    )


def run_selector(
    items: Sequence[SelectItem],
    *,
    multi: bool,
    title: str | None = None,
    input: Input | None = None,
    output: Output | None = None,
) -> tuple[int, ...]:
    """Let the user pick from *items*; return selected indices in list order.

    Single mode returns at most one index. An empty tuple means nothing was
    chosen.

    Raises:
        KeyboardInterrupt: the user pressed Ctrl-C or Ctrl-D. The terminal
            has already been restored when this propagates.
    """
    state = SelectionState(items=list(items), multi=multi)
    if not state.items:
        return ()
    # Prefer the controlling tty so the selector still works when stdin is a
    # pipe (``curl ... | sh``).
    app = build_selector_application(
        state,
        title=title,
        input=input if input is not None else create_input(always_prefer_tty=True),
        output=output,
    )
    return app.run()


def _bind(kb: KeyBindings, keys: Iterable[str], handler: Callable[[KeyPressEvent], None]) -> None:
    for key in keys:
        kb.add(key)(handler)
