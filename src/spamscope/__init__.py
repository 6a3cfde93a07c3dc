# =============================================================================
# spamscope: A Word-Frequency Spam Filter You Train Yourself
# =============================================================================
#
# spamscope keeps a table of how often each word has appeared in spam and in
# ham ("not spam") mail, scores new mail against it, and learns from your
# "Mark as Spam" / "Mark as Ham" corrections.
#
# Features:
#   - Transparent scoring: mean spam ratio of known words
#   - Per-word highlighting by spam/ham intensity
#   - Two interchangeable hash-table backends (chaining, linear probing)
#   - Plain transposed-CSV dataset you can edit by hand
#   - Dataset browser with filtering and sorting
#   - XDG Base Directory compliant
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spamscope"

# Main entry point - this is what gets called by the 'spamscope' command
from spamscope.app import main

__all__ = ["main", "__version__", "__app_name__"]
