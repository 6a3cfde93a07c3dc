# =============================================================================
# Store Module
# =============================================================================
# In-memory hash tables mapping words to their spam/ham counts.
#
# Both backends satisfy the WordFrequencyStore protocol and behave
# identically for any set of words that fits. spamscope keeps one of each
# populated in parallel so that equivalence can always be cross-checked.
# =============================================================================

from spamscope.store.base import DEFAULT_CAPACITY, WordFrequencyStore, word_hash
from spamscope.store.chaining import ChainingStore
from spamscope.store.probing import ProbingStore

__all__ = [
    "DEFAULT_CAPACITY",
    "WordFrequencyStore",
    "word_hash",
    "ChainingStore",
    "ProbingStore",
]
