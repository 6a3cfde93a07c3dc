# =============================================================================
# Word Table Widget
# =============================================================================
# A table view of dataset rows: word, spam count, ham count, total.
#
# The table only displays what the query engine returns; filtering and
# sorting happen in spamscope.dataset.query.
# =============================================================================

from textual.widgets import DataTable

from spamscope.dataset import QueryRow


def _fmt(value: float) -> str:
    """Format a count without a trailing .0 for whole numbers."""
    return f"{value:g}"


class WordTable(DataTable):
    """
    A table widget displaying dataset rows.

    Usage:
        >>> table = WordTable()
        >>> table.load_rows(service.query())
    """

    # Column configuration
    COLUMNS = [
        ("Word", 0),            # Flexible width
        ("Spam Frequency", 16),
        ("Ham Frequency", 16),
        ("Total Frequency", 16),
    ]

    def __init__(self, **kwargs) -> None:
        """
        Initialize the word table.

        Args:
            **kwargs: Additional arguments passed to DataTable.
        """
        super().__init__(**kwargs)
        self._pending: list[QueryRow] | None = None

        # Configure table
        self.cursor_type = "row"
        self.zebra_stripes = True

    def on_mount(self) -> None:
        """Set up columns when widget is mounted."""
        for label, width in self.COLUMNS:
            if width > 0:
                self.add_column(label, width=width)
            else:
                self.add_column(label)

        if self._pending is not None:
            self.load_rows(self._pending)
            self._pending = None

    def load_rows(self, rows: list[QueryRow]) -> None:
        """
        Replace the table contents.

        Args:
            rows: Query results to display, in display order.
        """
        if not self.columns:
            # Not mounted yet - show them once the columns exist
            self._pending = rows
            return

        self.clear()
        for row in rows:
            self.add_row(
                row.word,
                _fmt(row.spam_count),
                _fmt(row.ham_count),
                _fmt(row.total),
                key=row.word,
            )
