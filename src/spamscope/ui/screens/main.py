# =============================================================================
# Main Screen
# =============================================================================
# The primary view of spamscope:
#   - Top: the email text (type, paste, or load from a file)
#   - Buttons: classify, clear, load, mark spam/ham, open dataset
#   - Result line: verdict and probability
#   - Bottom: the email again, with known words highlighted
# =============================================================================

import logging
from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static, TextArea
from textual.containers import Horizontal, Vertical

from spamscope.errors import FileAccessError
from spamscope.service import SpamFilterService
from spamscope.ui.screens.dataset import DatasetScreen
from spamscope.ui.screens.load_email import LoadEmailScreen
from spamscope.ui.widgets.email_preview import EmailPreview

logger = logging.getLogger(__name__)


class MainScreen(Screen):
    """
    The email classification screen.

    Keybindings:
        - F5: Classify
        - F6: Mark as Spam
        - F7: Mark as Ham
        - F8: View Dataset
        - ctrl+o: Load email from file
        - ctrl+l: Clear
    """

    # Priority: the focused TextArea binds f6/f7 itself
    BINDINGS = [
        Binding("f5", "classify", "Classify", priority=True),
        Binding("f6", "mark_spam", "Spam", priority=True),
        Binding("f7", "mark_ham", "Ham", priority=True),
        Binding("f8", "view_dataset", "Dataset", priority=True),
        Binding("ctrl+o", "load_email", "Load", priority=True),
        Binding("ctrl+l", "clear", "Clear", priority=True),
    ]

    CSS = """
    #email-text {
        height: 1fr;
        border: solid $primary;
    }

    #button-row, #mark-row {
        height: auto;
        padding: 0 1;
    }

    #button-row Button, #mark-row Button {
        margin-right: 1;
    }

    #result-label {
        height: auto;
        text-style: bold;
        padding: 0 1;
        margin: 1 0;
    }

    #email-preview {
        height: 1fr;
        border-top: solid $primary;
    }
    """

    def __init__(self, service: SpamFilterService) -> None:
        """
        Initialize the main screen.

        Args:
            service: Service wrapping the dataset and classifier.
        """
        super().__init__()
        self.service = service

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield TextArea(id="email-text")
            with Horizontal(id="button-row"):
                yield Button("Classify", id="classify-btn", variant="success")
                yield Button("Clear Screen", id="clear-btn")
                yield Button("Load Email", id="load-btn")
                yield Button("View Dataset", id="dataset-btn")
            yield Static("", id="result-label")
            with Horizontal(id="mark-row"):
                yield Button("Mark as Spam", id="spam-btn", variant="error")
                yield Button("Mark as Ham", id="ham-btn", variant="primary")
            yield EmailPreview(id="email-preview")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#email-text", TextArea).focus()

    @property
    def email_text(self) -> str:
        return self.query_one("#email-text", TextArea).text

    def _set_result(self, markup: str) -> None:
        self.query_one("#result-label", Static).update(markup)

    # -------------------------------------------------------------------------
    # Event Handlers
    # -------------------------------------------------------------------------

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Route button presses to actions."""
        actions = {
            "classify-btn": self.action_classify,
            "clear-btn": self.action_clear,
            "load-btn": self.action_load_email,
            "dataset-btn": self.action_view_dataset,
            "spam-btn": self.action_mark_spam,
            "ham-btn": self.action_mark_ham,
        }
        action = actions.get(event.button.id)
        if action:
            action()

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_classify(self) -> None:
        """Classify the current text and highlight its words."""
        text = self.email_text
        result = self.service.classify_text(text)

        color = "#D32F2F" if result.is_spam else "#388E3C"
        self._set_result(f"[{color}]{result.label} (Probability: {result.probability:.6f})[/]")
        self.query_one("#email-preview", EmailPreview).show(text, self.service.highlight(text))

    def action_clear(self) -> None:
        """Clear the text, result and highlights."""
        self.query_one("#email-text", TextArea).clear()
        self._set_result("")
        self.query_one("#email-preview", EmailPreview).reset()

    def action_load_email(self) -> None:
        """Pick a text file and load it into the editor."""
        def on_picked(path: Path | None) -> None:
            if path is None:
                return
            try:
                content = self.service.read_email(path)
            except FileAccessError:
                self._set_result("[#D32F2F]Error: Could not open file[/]")
                return
            self.query_one("#email-text", TextArea).load_text(content)
            self._set_result("")
            self.query_one("#email-preview", EmailPreview).reset()

        self.app.push_screen(LoadEmailScreen(), on_picked)

    def action_view_dataset(self) -> None:
        """Open the dataset browser."""
        self.app.push_screen(DatasetScreen(self.service))

    def action_mark_spam(self) -> None:
        self._mark(is_spam=True)

    def action_mark_ham(self) -> None:
        self._mark(is_spam=False)

    def _mark(self, is_spam: bool) -> None:
        """Learn from the current text and save the dataset."""
        tokens = self.service.tokenize(self.email_text)
        if not tokens:
            self.notify("Nothing to learn from: the email has no words", severity="warning")
            return

        try:
            result = self.service.apply_feedback(tokens, is_spam)
        except FileAccessError as e:
            logger.error(f"Saving feedback failed: {e}")
            self.notify(f"Could not save dataset: {e}", severity="error")
            return

        if result.capacity_errors:
            self.notify(
                f"Hash table full: {len(result.capacity_errors)} words not mirrored",
                severity="error",
            )

        if is_spam:
            self._set_result("[#D32F2F]Frequencies updated as Spam[/]")
        else:
            self._set_result("[#388E3C]Frequencies updated as Ham[/]")
