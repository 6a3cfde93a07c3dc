# =============================================================================
# Word Frequency Model
# =============================================================================
# The single record type every store holds: a word with the number of times
# it has been seen in spam and in ham ("not spam") mail.
#
# Counts are floats because the dataset file may carry fractional values.
# They are never negative and, once an entry exists, only ever grow.
# =============================================================================

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """The two labels a piece of mail (or a word's evidence) can carry."""
    SPAM = "spam"
    HAM = "ham"


@dataclass
class WordFrequency:
    """
    Occurrence counts for one word.

    Attributes:
        word: The normalized word (lowercase ASCII letters and digits).
        spam_count: Times the word was seen in spam.
        ham_count: Times the word was seen in ham.

    Example:
        >>> wf = WordFrequency("free", spam_count=9, ham_count=1)
        >>> wf.spam_score
        0.9
    """

    word: str
    spam_count: float = 0.0
    ham_count: float = 0.0

    @property
    def total(self) -> float:
        """Total number of observations."""
        return self.spam_count + self.ham_count

    @property
    def spam_score(self) -> float:
        """Fraction of observations that were spam (0.0 if never observed)."""
        total = self.total
        return self.spam_count / total if total > 0 else 0.0

    @property
    def ham_score(self) -> float:
        """Fraction of observations that were ham (0.0 if never observed)."""
        total = self.total
        return self.ham_count / total if total > 0 else 0.0

    def incremented(self, category: Category) -> "WordFrequency":
        """Return a copy with one more observation in ``category``."""
        if category is Category.SPAM:
            return WordFrequency(self.word, self.spam_count + 1, self.ham_count)
        return WordFrequency(self.word, self.spam_count, self.ham_count + 1)

    @classmethod
    def first_seen(cls, word: str, category: Category) -> "WordFrequency":
        """Create the entry for a word observed once, in ``category``."""
        if category is Category.SPAM:
            return cls(word, spam_count=1.0, ham_count=0.0)
        return cls(word, spam_count=0.0, ham_count=1.0)

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.word} (spam={self.spam_count:g}, ham={self.ham_count:g})"
