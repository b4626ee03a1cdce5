"""Terminal selection UI and line prompts."""

from .line_input import read_line
from .render import render_fragments, truncate
from .selector import Selector, build_selector_application, run_selector
from .state import SelectionState, SelectItem, SelectorPhase

__all__ = [
    "SelectItem",
    "SelectionState",
    "Selector",
    "SelectorPhase",
    "build_selector_application",
    "read_line",
    "render_fragments",
    "run_selector",
    "truncate",
]
