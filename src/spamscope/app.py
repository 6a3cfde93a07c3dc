# =============================================================================
# spamscope Main Application
# =============================================================================
# The Textual application class plus the command-line entry point.
#
# The app manages:
#   - Configuration loading
#   - Loading the dataset once at startup
#   - Screen navigation
#   - Global keybindings
#
# The command line can also answer one-off questions without the TUI:
#   spamscope --classify mail.txt
#   spamscope --stats
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from spamscope import __version__, __app_name__
from spamscope.config import Config, ConfigError, ensure_directories, print_paths
from spamscope.errors import DatasetFileError, DatasetFormatError, SpamScopeError
from spamscope.service import SpamFilterService
from spamscope.ui.screens.main import MainScreen

logger = logging.getLogger(__name__)


class SpamScopeApp(App):
    """
    The main spamscope application.

    Attributes:
        service: The spam filter service every screen talks to.
        TITLE: Window title shown in terminal.
        SUB_TITLE: Subtitle shown in header.
        BINDINGS: Global keyboard shortcuts.
    """

    TITLE = "spamscope"
    SUB_TITLE = "Email Classification"

    # Global keybindings - these work from any screen
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "show_help", "Help"),
    ]

    def __init__(self, service: SpamFilterService, load_dataset: bool = True) -> None:
        """
        Initialize the spamscope application.

        Args:
            service: Service wrapping the dataset and classifier.
            load_dataset: Load the dataset file when the app mounts.
        """
        super().__init__()
        self.service = service
        self._load_dataset = load_dataset

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        if self.service.config.ui.theme == "light":
            self.theme = "textual-light"

        if self._load_dataset:
            self._load()

        await self.push_screen(MainScreen(self.service))

    def _load(self) -> None:
        """Load the dataset, reporting problems as notifications."""
        try:
            report = self.service.load()
        except (DatasetFileError, DatasetFormatError) as e:
            logger.warning(f"Starting with an empty dataset: {e}")
            if self.service.save_blocked_by:
                self.notify(
                    f"Dataset error: {e}. Marking spam/ham is disabled so the file "
                    "is not overwritten.",
                    severity="error",
                    timeout=10,
                )
            else:
                self.notify(
                    f"No dataset at {self.service.dataset_path}; starting empty",
                    severity="warning",
                    timeout=8,
                )
            return

        if report.column_errors:
            self.notify(
                f"Skipped {len(report.column_errors)} invalid columns",
                severity="warning",
            )
        if report.capacity_errors:
            self.notify(
                f"Hash table full: {len(report.capacity_errors)} words not mirrored",
                severity="error",
            )

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_show_help(self) -> None:
        """Show the help notification."""
        self.notify(
            "Keys: F5=classify, F6=mark spam, F7=mark ham, F8=dataset, "
            "ctrl+o=load email, ctrl+l=clear, ctrl+q=quit",
            timeout=10,
        )


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="spamscope: a word-frequency spam filter you train yourself",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--dataset",
        type=Path,
        help="Path to the dataset CSV (overrides the config file)",
    )

    parser.add_argument(
        "--classify",
        type=Path,
        metavar="FILE",
        help="Classify the email in FILE, print the result and exit",
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print dataset properties and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging to the state directory)",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool) -> None:
    """
    Configure logging.

    The TUI owns the terminal, so debug logs go to a file in the XDG state
    directory. Without --debug only warnings reach stderr.
    """
    if debug:
        ensure_directories()
        logging.basicConfig(
            filename=Config.log_file_path(),
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for spamscope.

    This function:
        1. Parses command-line arguments
        2. Loads configuration
        3. Handles one-off commands (--paths, --classify, --stats)
        4. Otherwise starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)
    setup_logging(args.debug)

    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1

    if args.paths:
        print_paths(config)
        return 0

    service = SpamFilterService(config, dataset_path=args.dataset)

    if args.classify or args.stats:
        try:
            service.load()
            if args.classify:
                result = service.classify_text(service.read_email(args.classify))
                print(f"{result.label} (Probability: {result.probability:.6f})")
            if args.stats:
                print("\n".join(service.dataset_stats().lines()))
        except SpamScopeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    # Create and run the application
    app = SpamScopeApp(service)
    app.run()

    return 0


if __name__ == "__main__":
    sys.exit(main())
