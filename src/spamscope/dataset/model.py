# =============================================================================
# Dataset
# =============================================================================
# The in-memory dataset: an ordered, append-only word list plus every store
# that mirrors it.
#
# The word list decides column order in the CSV file and the default order
# of every listing. Hash-table bucket order is never exposed.
#
# Invariant: every listed word has an entry in every store, and no store
# holds a word that isn't listed. A word the primary store refuses is
# not listed at all; a CapacityError from a bounded mirror is reported to
# the caller.
# =============================================================================

import logging
from collections.abc import Iterable, Iterator, Sequence

from spamscope.core import WordFrequency
from spamscope.errors import CapacityError
from spamscope.store import ChainingStore, DEFAULT_CAPACITY, ProbingStore, WordFrequencyStore

logger = logging.getLogger(__name__)


class Dataset:
    """
    Ordered word list with its mirrored stores.

    The first store is the primary: all reads go through it. The remaining
    stores are mirrors kept in sync on every write.

    Usage:
        >>> dataset = Dataset(capacity=101)
        >>> dataset.add(WordFrequency("free", 9, 1))
        []
        >>> dataset.words
        ['free']
        >>> dataset.lookup("free").spam_count
        9

    Attributes:
        words: The ordered word list (read it, don't mutate it directly).
        stores: Primary store followed by its mirrors.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        stores: Sequence[WordFrequencyStore] | None = None,
    ) -> None:
        """
        Initialize an empty dataset.

        Args:
            capacity: Capacity for the default chaining + probing stores.
            stores: Explicit stores (primary first). Overrides ``capacity``.
        """
        if stores is None:
            stores = (ChainingStore(capacity), ProbingStore(capacity))
        if not stores:
            raise ValueError("A dataset needs at least one store")
        self.stores: tuple[WordFrequencyStore, ...] = tuple(stores)
        self.words: list[str] = []

    @property
    def primary(self) -> WordFrequencyStore:
        """The store every read goes through."""
        return self.stores[0]

    def lookup(self, word: str) -> WordFrequency | None:
        """Look a word up in the primary store."""
        return self.primary.lookup(word)

    def add(self, entry: WordFrequency) -> list[CapacityError]:
        """
        Insert or overwrite an entry in every store.

        A word not yet present is appended to the word list; an existing
        word keeps its position. If the primary store refuses the word,
        nothing is written anywhere and the word is not listed.

        Returns:
            CapacityErrors raised by stores that had no room (may be empty).
        """
        is_new = self.primary.lookup(entry.word) is None
        try:
            self.primary.insert(entry)
        except CapacityError as e:
            return [e]

        errors = self._write_mirrors(entry)
        if is_new:
            self.words.append(entry.word)
        return errors

    def _write_mirrors(self, entry: WordFrequency) -> list[CapacityError]:
        errors = []
        for store in self.stores[1:]:
            try:
                store.insert(entry)
            except CapacityError as e:
                errors.append(e)
        return errors

    def replace_with(self, entries: Iterable[WordFrequency]) -> list[CapacityError]:
        """
        Clear every store and the word list, then add ``entries`` in order.

        Returns:
            Every CapacityError raised along the way.
        """
        self.clear()
        errors = []
        for entry in entries:
            errors.extend(self.add(entry))
        return errors

    def clear(self) -> None:
        """Wipe every store and the word list."""
        for store in self.stores:
            store.clear()
        self.words.clear()

    def entries(self) -> Iterator[WordFrequency]:
        """Yield primary-store entries in word-list order."""
        for word in self.words:
            entry = self.primary.lookup(word)
            if entry is not None:
                yield entry

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.primary.lookup(word) is not None

    def __repr__(self) -> str:
        return f"Dataset(words={len(self.words)}, stores={list(self.stores)!r})"
