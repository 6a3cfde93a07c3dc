# =============================================================================
# Filter Screen
# =============================================================================
# Modal dialog for filtering and sorting the dataset view.
#
# Features:
#   - Substring filter on the word
#   - Above/below thresholds on spam count, ham count, spam score, ham score
#     (leave a field blank to ignore it)
#   - Sort order
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Select, Static
from textual.containers import Horizontal, Vertical

from spamscope.dataset import SortKey, WordFilter
from spamscope.errors import ValidationError

DIRECTION_OPTIONS = [("Above", "above"), ("Below", "below")]

# (field id, label, placeholder)
NUMERIC_FIELDS = [
    ("spam-count", "Spam Count Threshold:", "e.g., 10"),
    ("ham-count", "Ham Count Threshold:", "e.g., 5"),
    ("spam-score", "Spam Score Threshold:", "e.g., 0.7"),
    ("ham-score", "Ham Score Threshold:", "e.g., 0.3"),
]


class FilterScreen(ModalScreen[tuple[WordFilter, SortKey] | None]):
    """
    Modal screen for entering filter and sort options.

    Returns a tuple of (WordFilter, SortKey) or None if cancelled.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    FilterScreen {
        align: center middle;
    }

    #filter-container {
        width: 72;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #filter-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    .filter-row {
        height: auto;
    }

    .filter-row Static {
        width: 24;
        padding-top: 1;
    }

    .filter-row Input {
        width: 1fr;
    }

    .filter-row Select {
        width: 16;
    }

    #filter-buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }

    #filter-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, sort_key: SortKey = SortKey.ALPHABETICAL) -> None:
        """
        Initialize the filter screen.

        Args:
            sort_key: Sort order to preselect.
        """
        super().__init__()
        self._sort_key = sort_key

    def compose(self) -> ComposeResult:
        with Vertical(id="filter-container"):
            yield Static("Filter Options", id="filter-title")
            with Horizontal(classes="filter-row"):
                yield Static("Sort by:")
                yield Select(
                    [(key.label, key) for key in SortKey],
                    value=self._sort_key,
                    allow_blank=False,
                    id="sort-select",
                )
            with Horizontal(classes="filter-row"):
                yield Static("Alphabetical Filter:")
                yield Input(placeholder="Enter substring (e.g., 'free')", id="substring-input")
            for field_id, label, placeholder in NUMERIC_FIELDS:
                with Horizontal(classes="filter-row"):
                    yield Static(label)
                    yield Input(placeholder=placeholder, id=f"{field_id}-input")
                    yield Select(
                        DIRECTION_OPTIONS,
                        value="above",
                        allow_blank=False,
                        id=f"{field_id}-direction",
                    )
            with Horizontal(id="filter-buttons"):
                yield Button("Apply Filter", id="apply-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        """Focus the substring input on mount."""
        self.query_one("#substring-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle enter in any input."""
        self._apply()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "apply-btn":
            self._apply()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def _value(self, widget_id: str) -> str:
        return self.query_one(f"#{widget_id}-input", Input).value

    def _direction(self, widget_id: str) -> str:
        return str(self.query_one(f"#{widget_id}-direction", Select).value)

    def _apply(self) -> None:
        """Build the filter and close, or report the bad field."""
        try:
            word_filter = WordFilter.from_text(
                substring=self.query_one("#substring-input", Input).value,
                spam_count=self._value("spam-count"),
                ham_count=self._value("ham-count"),
                spam_score=self._value("spam-score"),
                ham_score=self._value("ham-score"),
                spam_count_direction=self._direction("spam-count"),
                ham_count_direction=self._direction("ham-count"),
                spam_score_direction=self._direction("spam-score"),
                ham_score_direction=self._direction("ham-score"),
            )
        except ValidationError as e:
            self.notify(str(e), severity="error")
            return

        sort_key = self.query_one("#sort-select", Select).value
        self.dismiss((word_filter, sort_key))

    def action_cancel(self) -> None:
        """Cancel and return None."""
        self.dismiss(None)
