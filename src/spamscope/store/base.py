# =============================================================================
# Word Frequency Store Contract
# =============================================================================
# The capability set every hash-table backend provides, plus the hash
# function they share.
#
# Two backends implement it:
#   - ChainingStore: one list of entries per bucket (separate chaining)
#   - ProbingStore: one flat slot array with linear probing (open addressing)
#
# Callers only ever hold "a store" and never need to know which one.
# Capacity is fixed for the lifetime of a store; there is no resizing.
# =============================================================================

from typing import Protocol, runtime_checkable

from spamscope.core import WordFrequency

# Default number of buckets/slots (prime)
DEFAULT_CAPACITY = 10007

# Polynomial multiplier for the rolling hash
HASH_MULTIPLIER = 37

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000


def word_hash(word: str, capacity: int) -> int:
    """
    Hash a word to a bucket index in ``[0, capacity)``.

    Polynomial rolling hash over the word's UTF-8 bytes with multiplier 37
    (undecodable bytes kept from the dataset file hash as themselves).
    Each byte is read as a signed 8-bit value and the accumulator wraps as a
    signed 32-bit integer, so words hash to the same buckets that existing
    C tooling uses for the same dataset.

    Args:
        word: The key to hash.
        capacity: Table capacity (must be positive).

    Returns:
        Non-negative bucket index.
    """
    value = 0
    for byte in word.encode("utf-8", errors="surrogateescape"):
        signed_byte = byte - 256 if byte > 127 else byte
        value = (HASH_MULTIPLIER * value + signed_byte) & _INT32_MASK
    if value & _INT32_SIGN:
        value -= 1 << 32
    return abs(value) % capacity


def check_capacity(capacity: int) -> int:
    """Validate a store capacity, returning it unchanged."""
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
        raise ValueError(f"Store capacity must be a positive integer, got {capacity!r}")
    return capacity


@runtime_checkable
class WordFrequencyStore(Protocol):
    """
    A fixed-capacity mapping of word -> WordFrequency.

    ``insert`` overwrites the counts of an existing word in place and never
    creates duplicates. ``lookup`` returns a reference to the stored entry,
    or None. Backends that can run out of room raise
    ``spamscope.errors.CapacityError`` from ``insert``.
    """

    @property
    def capacity(self) -> int:
        ...

    @property
    def count(self) -> int:
        ...

    @property
    def load_factor(self) -> float:
        ...

    def insert(self, entry: WordFrequency) -> None:
        ...

    def lookup(self, word: str) -> WordFrequency | None:
        ...

    def clear(self) -> None:
        ...

    def __len__(self) -> int:
        ...
