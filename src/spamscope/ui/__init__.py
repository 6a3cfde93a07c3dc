# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for spamscope.
#
# Structure:
#   - screens/: Full-screen views and modal dialogs
#   - widgets/: Reusable UI components (word table, email preview)
#
# The UI holds no scoring logic of its own; every screen works through
# spamscope.service.SpamFilterService.
# =============================================================================

from spamscope.ui.screens.main import MainScreen
from spamscope.ui.screens.dataset import DatasetScreen

from spamscope.ui.widgets.email_preview import EmailPreview
from spamscope.ui.widgets.word_table import WordTable

__all__ = [
    "MainScreen",
    "DatasetScreen",
    "EmailPreview",
    "WordTable",
]
