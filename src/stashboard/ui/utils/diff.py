"""Diff colorization for the preview pane."""

from __future__ import annotations

from rich.text import Text

_HEADER_PREFIXES = ("diff --git", "index ", "new file mode", "deleted file mode", "similarity index")


def style_for_line(line: str) -> str:
    """Return the Rich style for a single unified-diff line."""
    if line.startswith(("+++", "---")) or line.startswith(_HEADER_PREFIXES):
        return "bold"
    if line.startswith("@@"):
        return "cyan"
    if line.startswith("+"):
        return "green"
    if line.startswith("-"):
        return "red"
    return ""


def colorize_patch(patch: str) -> Text:
    """Build a styled Text from unified patch text, without interpreting markup."""
    text = Text(no_wrap=True)
    lines = patch.split("\n")
    for i, line in enumerate(lines):
        text.append(line, style=style_for_line(line))
        if i < len(lines) - 1:
            text.append("\n")
    return text


def render_preview(content: str, *, colorize: bool) -> Text:
    """Render preview content as literal text, colorized when requested."""
    if colorize:
        return colorize_patch(content)
    return Text(content, no_wrap=True)
