"""Key bindings for the Stashboard TUI."""

from __future__ import annotations

from textual.binding import Binding, BindingType

APP_BINDINGS: list[BindingType] = [
    Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    Binding("f12", "show_debug_log", "Debug log", show=False),
]

STASH_BINDINGS: list[BindingType] = [
    Binding("d", "drop", "Drop"),
    Binding("a", "apply", "Apply"),
    Binding("p", "pop", "Pop"),
    Binding("question_mark", "toggle_help", "Toggle help"),
    # Priority so the preview scrolls even while the stash list has focus
    Binding("pageup", "scroll_preview(-1)", "Scroll up", show=False, priority=True),
    Binding("pagedown", "scroll_preview(1)", "Scroll down", show=False, priority=True),
    Binding("q", "quit", "Quit"),
    Binding("escape", "quit", "Quit", show=False),
]

STASH_LIST_BINDINGS: list[BindingType] = [
    Binding("j", "cursor_down", "Down", show=False),
    Binding("k", "cursor_up", "Up", show=False),
    Binding("g", "first", "First", show=False),
    Binding("G", "last", "Last", show=False),
]

MODAL_DISMISS_BINDINGS: list[BindingType] = [
    Binding("escape", "close", "Close"),
    Binding("enter", "close", "Close", show=False),
    Binding("q", "close", "Close", show=False),
]
