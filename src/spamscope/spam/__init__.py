# =============================================================================
# Spam Module
# =============================================================================
# Word-ratio spam filtering over a user-trained word table.
#
# Unlike server-side spam filters, this one:
#   - Learns only from YOUR "Mark as Spam" / "Mark as Ham" feedback
#   - Works offline
#   - Explains itself: every word's contribution can be highlighted
#
# A message's score is simply the mean spam ratio of the words it shares
# with the table. Simple and predictable.
# =============================================================================

from spamscope.spam.classifier import (
    Classification,
    Classifier,
    Contribution,
    Polarity,
    classify,
    contribution,
    parse_threshold,
)
from spamscope.spam.feedback import FeedbackEngine, FeedbackResult, apply_feedback
from spamscope.spam.tokenizer import Tokenizer, normalize_token

__all__ = [
    "Classification",
    "Classifier",
    "Contribution",
    "Polarity",
    "classify",
    "contribution",
    "parse_threshold",
    "FeedbackEngine",
    "FeedbackResult",
    "apply_feedback",
    "Tokenizer",
    "normalize_token",
]
