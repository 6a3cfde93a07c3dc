# =============================================================================
# Email Preview Widget
# =============================================================================
# Shows the email text with every known word coloured by how strongly it
# points at spam (reds) or ham (greens). Five intensity levels each, darkest
# for the strongest evidence.
# =============================================================================

from rich.text import Text
from textual.containers import ScrollableContainer
from textual.widgets import Static

from spamscope.spam import Contribution, Polarity

SPAM_COLORS = {
    1: "#FFCCCC",   # light red
    2: "#FF9999",
    3: "#FF6666",
    4: "#FF3333",
    5: "#FF0000",   # dark red
}

HAM_COLORS = {
    1: "#CCFFCC",   # light green
    2: "#99FF99",
    3: "#66FF66",
    4: "#33FF33",
    5: "#00FF00",   # dark green
}


def color_for(result: Contribution) -> str | None:
    """Foreground colour for a tagged contribution, or None."""
    if result.polarity is Polarity.SPAM:
        return SPAM_COLORS.get(result.level)
    if result.polarity is Polarity.HAM:
        return HAM_COLORS.get(result.level)
    return None


def highlighted_text(text: str, spans) -> Text:
    """
    Build a Rich Text with each span coloured.

    Args:
        text: The raw email text.
        spans: (start, end, word, contribution) tuples, as produced by
               SpamFilterService.highlight().
    """
    rendered = Text(text)
    for start, end, _word, result in spans:
        color = color_for(result)
        if color:
            rendered.stylize(f"bold {color}", start, end)
    return rendered


class EmailPreview(ScrollableContainer):
    """
    A scrollable, highlighted rendering of the email under test.

    Usage:
        >>> preview = EmailPreview()
        >>> preview.show(text, service.highlight(text))
    """

    DEFAULT_CSS = """
    EmailPreview {
        padding: 0 1;
    }

    EmailPreview > #preview-body {
        height: auto;
    }
    """

    def compose(self):
        """Compose the widget."""
        yield Static("Classify an email to see word highlights", id="preview-body")

    def show(self, text: str, spans) -> None:
        """Render ``text`` with the given highlight spans."""
        self.query_one("#preview-body", Static).update(highlighted_text(text, spans))

    def reset(self) -> None:
        """Go back to the placeholder."""
        self.query_one("#preview-body", Static).update("Classify an email to see word highlights")
