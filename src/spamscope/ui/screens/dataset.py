# =============================================================================
# Dataset Screen
# =============================================================================
# Full-window browser over the word table.
#
#   +--------------------------------------------------+
#   | Word | Spam Frequency | Ham Frequency | Total    |
#   |  ...                                             |
#   +--------------------------------------------------+
#   | [Filter]  [Properties]  [Close]     N words      |
#   +--------------------------------------------------+
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static
from textual.containers import Horizontal, Vertical

from spamscope.dataset import SortKey, WordFilter
from spamscope.service import SpamFilterService
from spamscope.ui.screens.filter import FilterScreen
from spamscope.ui.screens.properties import PropertiesScreen
from spamscope.ui.widgets.word_table import WordTable


class DatasetScreen(Screen):
    """
    Shows the dataset as a table, with filter and properties dialogs.

    Keybindings:
        - f: Filter / sort
        - p: Properties (stats, threshold)
        - escape: Back to the main screen
    """

    BINDINGS = [
        Binding("f", "filter", "Filter"),
        Binding("p", "properties", "Properties"),
        Binding("escape", "close", "Back"),
    ]

    CSS = """
    #word-table {
        height: 1fr;
    }

    #dataset-buttons {
        height: auto;
        padding: 0 1;
    }

    #dataset-buttons Button {
        margin-right: 1;
    }

    #dataset-status {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, service: SpamFilterService) -> None:
        super().__init__()
        self.service = service
        self._filter = WordFilter()
        self._sort_key = SortKey.ALPHABETICAL

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield WordTable(id="word-table")
            with Horizontal(id="dataset-buttons"):
                yield Button("Filter", id="filter-btn")
                yield Button("Properties", id="properties-btn")
                yield Button("Close", id="close-btn")
            yield Static(id="dataset-status")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_rows()

    def refresh_rows(self) -> None:
        """Re-run the current query and redraw the table."""
        rows = self.service.query(self._filter, self._sort_key)
        self.query_one("#word-table", WordTable).load_rows(rows)
        self.query_one("#dataset-status", Static).update(
            f"{len(rows)} of {len(self.service.dataset)} words, sorted by {self._sort_key.label}"
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "filter-btn":
            self.action_filter()
        elif event.button.id == "properties-btn":
            self.action_properties()
        elif event.button.id == "close-btn":
            self.action_close()

    def action_filter(self) -> None:
        """Open the filter dialog."""
        def on_filter(result: tuple[WordFilter, SortKey] | None) -> None:
            if result is None:
                return
            self._filter, self._sort_key = result
            self.refresh_rows()

        self.app.push_screen(FilterScreen(self._sort_key), on_filter)

    def action_properties(self) -> None:
        """Open the properties dialog."""
        self.app.push_screen(PropertiesScreen(self.service))

    def action_close(self) -> None:
        self.app.pop_screen()
