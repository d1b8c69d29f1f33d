"""Patch preview pane."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textual.containers import VerticalScroll
from textual.widgets import Static

from stashboard.core.selection import Cleanliness
from stashboard.ui.utils.diff import render_preview

if TYPE_CHECKING:
    from textual.app import ComposeResult

_STATE_CLASSES = {
    Cleanliness.CLEAN: "-clean",
    Cleanliness.DIRTY: "-dirty",
    Cleanliness.PENDING: "-pending",
}


class PatchPreview(VerticalScroll, can_focus=False):
    """Scrollable diff view whose border color tracks the clean state."""

    def __init__(self, *, colorize: bool = True, **kwargs) -> None:
        super().__init__(**kwargs)
        self._colorize = colorize
        self._patch_text = ""
        self._cleanliness = Cleanliness.PENDING
        self.add_class(_STATE_CLASSES[self._cleanliness])

    def compose(self) -> ComposeResult:
        yield Static("", id="preview-content")

    @property
    def content(self) -> str:
        return self._patch_text

    @property
    def cleanliness(self) -> Cleanliness:
        return self._cleanliness

    def show(self, content: str, cleanliness: Cleanliness) -> None:
        """Display content and color the border for cleanliness."""
        if content != self._patch_text:
            self._patch_text = content
            self.query_one("#preview-content", Static).update(
                render_preview(content, colorize=self._colorize)
            )
            self.scroll_home(animate=False)
        if cleanliness is not self._cleanliness:
            self.remove_class(_STATE_CLASSES[self._cleanliness])
            self.add_class(_STATE_CLASSES[cleanliness])
            self._cleanliness = cleanliness

    def scroll_lines(self, lines: int) -> None:
        self.scroll_relative(y=lines, animate=False)
