# =============================================================================
# Separate-Chaining Store
# =============================================================================
# Each bucket is an independent Python list that owns its entries. Colliding
# words simply share a bucket, so inserts never fail; operations cost
# O(1 + load factor) on average and degrade gracefully when overloaded.
# =============================================================================

from dataclasses import replace

from spamscope.core import WordFrequency
from spamscope.store.base import DEFAULT_CAPACITY, check_capacity, word_hash


class ChainingStore:
    """
    Hash table with separate chaining.

    Usage:
        >>> store = ChainingStore(capacity=101)
        >>> store.insert(WordFrequency("free", 9, 1))
        >>> store.lookup("free").spam_count
        9

    Attributes:
        capacity: Number of buckets (fixed).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = check_capacity(capacity)
        self._buckets: list[list[WordFrequency]] = [[] for _ in range(self._capacity)]
        self._count = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def count(self) -> int:
        """Number of distinct words stored."""
        return self._count

    @property
    def load_factor(self) -> float:
        """Stored entries divided by bucket count."""
        return self._count / self._capacity

    def insert(self, entry: WordFrequency) -> None:
        """
        Insert an entry, overwriting the counts of an existing word.

        The store keeps its own copy, so later changes to ``entry`` do not
        leak into the table.
        """
        bucket = self._buckets[word_hash(entry.word, self._capacity)]
        for existing in bucket:
            if existing.word == entry.word:
                existing.spam_count = entry.spam_count
                existing.ham_count = entry.ham_count
                return
        bucket.append(replace(entry))
        self._count += 1

    def lookup(self, word: str) -> WordFrequency | None:
        """Return the stored entry for ``word``, or None."""
        for existing in self._buckets[word_hash(word, self._capacity)]:
            if existing.word == word:
                return existing
        return None

    def clear(self) -> None:
        """Discard every entry."""
        for bucket in self._buckets:
            bucket.clear()
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __repr__(self) -> str:
        return f"ChainingStore(capacity={self._capacity}, count={self._count})"
