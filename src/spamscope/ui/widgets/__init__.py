# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components for spamscope:
#   - WordTable: Dataset rows (word, spam, ham, total)
#   - EmailPreview: Email text with spam/ham word highlighting
# =============================================================================

from spamscope.ui.widgets.email_preview import EmailPreview
from spamscope.ui.widgets.word_table import WordTable

__all__ = ["EmailPreview", "WordTable"]
