# =============================================================================
# Linear-Probing Store
# =============================================================================
# Open addressing over a single slot array. A word hashes to a start slot;
# on collision we step forward one slot at a time (wrapping around) for at
# most `capacity` slots.
#
# There is no delete operation anywhere in spamscope, so no tombstones are
# needed: the first empty slot on a probe path proves the word is absent.
#
# This is the only backend that can fail. When the probe path is exhausted
# without finding an empty slot or the word itself, insert raises
# CapacityError and the table is left unchanged.
# =============================================================================

from dataclasses import replace

from spamscope.core import WordFrequency
from spamscope.errors import CapacityError
from spamscope.store.base import DEFAULT_CAPACITY, check_capacity, word_hash


class ProbingStore:
    """
    Hash table with open addressing and linear probing.

    Usage:
        >>> store = ProbingStore(capacity=3)
        >>> store.insert(WordFrequency("free", 9, 1))
        >>> store.lookup("free") is not None
        True

    Attributes:
        capacity: Number of slots (fixed).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = check_capacity(capacity)
        # Each slot is (occupied, entry)
        self._slots: list[tuple[bool, WordFrequency | None]] = [(False, None)] * self._capacity
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
        """Occupied slots divided by slot count."""
        return self._count / self._capacity

    def _probe(self, word: str):
        """Yield slot indexes along the probe path of ``word``."""
        start = word_hash(word, self._capacity)
        for step in range(self._capacity):
            yield (start + step) % self._capacity

    def insert(self, entry: WordFrequency) -> None:
        """
        Insert an entry, overwriting the counts of an existing word.

        Raises:
            CapacityError: If every slot on the probe path holds another word.
        """
        for index in self._probe(entry.word):
            occupied, existing = self._slots[index]
            if not occupied:
                self._slots[index] = (True, replace(entry))
                self._count += 1
                return
            if existing.word == entry.word:
                existing.spam_count = entry.spam_count
                existing.ham_count = entry.ham_count
                return

        raise CapacityError(entry.word, self._capacity)

    def lookup(self, word: str) -> WordFrequency | None:
        """Return the stored entry for ``word``, or None."""
        for index in self._probe(word):
            occupied, existing = self._slots[index]
            if not occupied:
                return None
            if existing.word == word:
                return existing
        return None

    def clear(self) -> None:
        """Mark every slot as unoccupied."""
        self._slots = [(False, None)] * self._capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def __repr__(self) -> str:
        return f"ProbingStore(capacity={self._capacity}, count={self._count})"
