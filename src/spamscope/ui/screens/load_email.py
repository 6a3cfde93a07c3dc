# =============================================================================
# Load Email Screen
# =============================================================================
# Modal picker for the email text file to classify.
#
#   +-------------------------------------------+
#   |  Open Email File                          |
#   |  [ /path/typed/or/picked.txt           ]  |
#   |  +-------------------------------------+  |
#   |  | directory tree (hidden files off)   |  |
#   |  +-------------------------------------+  |
#   |  picked.txt - 2.1 KB                      |
#   |            [Open]  [Cancel]               |
#   +-------------------------------------------+
#
# Dismisses with the chosen Path, or None when cancelled. Reading the file
# is the caller's job (SpamFilterService.read_email).
# =============================================================================

from collections.abc import Iterable
from pathlib import Path

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Button, DirectoryTree, Input, Static
from textual.containers import Horizontal, Vertical


class EmailFileTree(DirectoryTree):
    """Directory tree without dot-files."""

    def filter_paths(self, paths: Iterable[Path]) -> Iterable[Path]:
        return [path for path in paths if not path.name.startswith(".")]


def describe_file(path: Path) -> str:
    """One-line summary of a candidate file for the status line."""
    try:
        size = path.stat().st_size
    except OSError:
        return f"{path.name} - not readable"
    if size < 1024:
        return f"{path.name} - {size} bytes"
    return f"{path.name} - {size / 1024:.1f} KB"


class LoadEmailScreen(ModalScreen[Path | None]):
    """
    Pick an email file by browsing or by typing its path.

    Usage:
        >>> def on_picked(path):
        ...     if path is not None:
        ...         text = service.read_email(path)
        >>> app.push_screen(LoadEmailScreen(), on_picked)
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    CSS = """
    LoadEmailScreen {
        align: center middle;
    }

    #load-email-container {
        width: 80%;
        height: 80%;
        min-width: 60;
        min-height: 20;
        background: $surface;
        border: thick $primary;
        padding: 1;
    }

    #load-email-title {
        text-align: center;
        text-style: bold;
    }

    #email-tree {
        height: 1fr;
        border: tall $primary;
        margin-top: 1;
    }

    #load-email-status {
        height: 1;
        color: $text-muted;
    }

    #load-email-buttons {
        height: auto;
        align: center middle;
    }

    #load-email-buttons Button {
        margin: 0 1;
    }
    """

    def __init__(self, start_dir: Path | None = None) -> None:
        """
        Args:
            start_dir: Directory the tree opens in. Defaults to the cwd.
        """
        super().__init__()
        self.start_dir = (start_dir or Path.cwd()).expanduser()

    def compose(self) -> ComposeResult:
        with Vertical(id="load-email-container"):
            yield Static("Open Email File", id="load-email-title")
            yield Input(placeholder="Path to a text file", id="path-input")
            yield EmailFileTree(str(self.start_dir), id="email-tree")
            yield Static("", id="load-email-status")
            with Horizontal(id="load-email-buttons"):
                yield Button("Open", id="open-btn", variant="primary")
                yield Button("Cancel", id="cancel-btn")

    def on_mount(self) -> None:
        self.query_one("#email-tree", EmailFileTree).focus()

    @property
    def typed_path(self) -> Path | None:
        value = self.query_one("#path-input", Input).value.strip()
        return Path(value).expanduser() if value else None

    def on_directory_tree_file_selected(self, event: DirectoryTree.FileSelected) -> None:
        """Copy the picked file into the path field."""
        self.query_one("#path-input", Input).value = str(event.path)
        self.query_one("#load-email-status", Static).update(describe_file(event.path))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter opens a file, or re-roots the tree at a directory."""
        path = self.typed_path
        if path is not None and path.is_dir():
            tree = self.query_one("#email-tree", EmailFileTree)
            tree.path = path
            return
        self.action_open()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "open-btn":
            self.action_open()
        elif event.button.id == "cancel-btn":
            self.action_cancel()

    def action_open(self) -> None:
        path = self.typed_path
        if path is None or not path.is_file():
            self.notify("Please select a file", severity="warning")
            return
        self.dismiss(path)

    def action_cancel(self) -> None:
        self.dismiss(None)
