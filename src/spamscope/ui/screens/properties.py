# =============================================================================
# Properties Screen
# =============================================================================
# Modal dialog with dataset statistics and the spam threshold control.
# =============================================================================

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Static
from textual.containers import Horizontal, Vertical

from spamscope.errors import ValidationError
from spamscope.service import SpamFilterService


class PropertiesScreen(ModalScreen[None]):
    """Shows dataset properties and lets the user change the threshold."""

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    CSS = """
    PropertiesScreen {
        align: center middle;
    }

    #properties-container {
        width: 64;
        height: auto;
        background: $surface;
        border: thick $primary;
        padding: 1 2;
    }

    #properties-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    #properties-body {
        margin-bottom: 1;
    }

    #threshold-row {
        height: auto;
    }

    #threshold-row Input {
        width: 1fr;
    }

    #properties-buttons {
        height: auto;
        margin-top: 1;
        align: center middle;
    }
    """

    def __init__(self, service: SpamFilterService) -> None:
        super().__init__()
        self.service = service

    def compose(self) -> ComposeResult:
        with Vertical(id="properties-container"):
            yield Static("Dataset Properties", id="properties-title")
            yield Static(id="properties-body")
            yield Static("New Spam Threshold (0.0-1.0):")
            with Horizontal(id="threshold-row"):
                yield Input(placeholder="e.g., 0.7", id="threshold-input")
                yield Button("Update Threshold", id="threshold-btn", variant="primary")
            with Horizontal(id="properties-buttons"):
                yield Button("Close", id="close-btn")

    def on_mount(self) -> None:
        self._refresh()

    def _refresh(self) -> None:
        """Redraw the statistics."""
        stats = self.service.dataset_stats()
        self.query_one("#properties-body", Static).update("\n".join(stats.lines()))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._update_threshold()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "threshold-btn":
            self._update_threshold()
        elif event.button.id == "close-btn":
            self.action_close()

    def _update_threshold(self) -> None:
        text = self.query_one("#threshold-input", Input).value
        try:
            self.service.set_threshold(text)
        except ValidationError as e:
            self.notify(str(e), severity="error")
            return
        self.notify("Threshold updated successfully")
        self._refresh()

    def action_close(self) -> None:
        self.dismiss(None)
