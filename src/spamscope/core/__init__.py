# =============================================================================
# spamscope Core Module
# =============================================================================
# Core domain models. Pure Python dataclasses with no external dependencies,
# importable anywhere without circular-import trouble.
#
#   - WordFrequency: A word with its spam and ham occurrence counts
#   - Category: The spam/ham label
# =============================================================================

from spamscope.core.word import Category, WordFrequency

__all__ = [
    "Category",
    "WordFrequency",
]
