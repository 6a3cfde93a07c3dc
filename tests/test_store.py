# =============================================================================
# Store Tests
# =============================================================================
# Hash function, both hash-table backends, and their equivalence.
# =============================================================================

import pytest

from spamscope.core import WordFrequency
from spamscope.errors import CapacityError
from spamscope.store import (
    DEFAULT_CAPACITY,
    ChainingStore,
    ProbingStore,
    WordFrequencyStore,
    word_hash,
)

BACKENDS = [ChainingStore, ProbingStore]


class TestWordHash:
    def test_known_values(self):
        assert word_hash("a", DEFAULT_CAPACITY) == 97
        assert word_hash("ab", DEFAULT_CAPACITY) == 37 * 97 + 98

    def test_non_ascii_bytes_are_signed(self):
        # "é" is 0xC3 0xA9 in UTF-8, read as -61 and -87
        assert word_hash("é", DEFAULT_CAPACITY) == abs(37 * -61 - 87)

    def test_always_in_range(self):
        words = ["", "free", "x" * 200, "supercalifragilisticexpialidocious", "ünïcödé"]
        for capacity in (1, 3, 101, DEFAULT_CAPACITY):
            for word in words:
                assert 0 <= word_hash(word, capacity) < capacity

    def test_deterministic(self):
        assert word_hash("meeting", 101) == word_hash("meeting", 101)


@pytest.mark.parametrize("backend", BACKENDS)
class TestStoreContract:
    def test_satisfies_protocol(self, backend):
        assert isinstance(backend(11), WordFrequencyStore)

    def test_insert_and_lookup(self, backend):
        store = backend(101)
        store.insert(WordFrequency("free", 9, 1))

        entry = store.lookup("free")
        assert entry is not None
        assert (entry.spam_count, entry.ham_count) == (9, 1)
        assert store.lookup("meeting") is None

    def test_insert_overwrites_without_duplicating(self, backend):
        store = backend(101)
        store.insert(WordFrequency("free", 9, 1))
        store.insert(WordFrequency("free", 10, 2))

        assert store.count == 1
        assert len(store) == 1
        entry = store.lookup("free")
        assert (entry.spam_count, entry.ham_count) == (10, 2)

    def test_store_keeps_its_own_copy(self, backend):
        store = backend(101)
        original = WordFrequency("free", 9, 1)
        store.insert(original)
        original.spam_count = 100

        assert store.lookup("free").spam_count == 9

    def test_load_factor(self, backend):
        store = backend(10)
        for word in ("a", "b", "c"):
            store.insert(WordFrequency(word, 1, 0))
        assert store.load_factor == pytest.approx(0.3)

    def test_clear(self, backend):
        store = backend(11)
        store.insert(WordFrequency("free", 9, 1))
        store.clear()

        assert store.count == 0
        assert store.lookup("free") is None
        store.insert(WordFrequency("free", 1, 1))
        assert store.count == 1

    def test_contains(self, backend):
        store = backend(11)
        store.insert(WordFrequency("free", 9, 1))
        assert "free" in store
        assert "meeting" not in store

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, True])
    def test_invalid_capacity(self, backend, capacity):
        with pytest.raises(ValueError):
            backend(capacity)


class TestChainingStore:
    def test_overloaded_table_still_works(self):
        store = ChainingStore(capacity=1)
        words = [f"word{i}" for i in range(50)]
        for i, word in enumerate(words):
            store.insert(WordFrequency(word, i, 0))

        assert store.count == 50
        assert store.load_factor == 50
        for i, word in enumerate(words):
            assert store.lookup(word).spam_count == i


class TestProbingStore:
    def test_fourth_insert_into_capacity_three_fails(self):
        store = ProbingStore(capacity=3)
        for word in ("alpha", "beta", "gamma"):
            store.insert(WordFrequency(word, 1, 0))

        with pytest.raises(CapacityError) as excinfo:
            store.insert(WordFrequency("delta", 1, 0))

        assert excinfo.value.word == "delta"
        assert excinfo.value.capacity == 3
        assert store.count == 3
        for word in ("alpha", "beta", "gamma"):
            assert store.lookup(word) is not None
        assert store.lookup("delta") is None

    def test_full_table_still_overwrites_existing_words(self):
        store = ProbingStore(capacity=2)
        store.insert(WordFrequency("alpha", 1, 0))
        store.insert(WordFrequency("beta", 1, 0))

        store.insert(WordFrequency("beta", 5, 5))
        assert store.lookup("beta").spam_count == 5

    def test_lookup_in_full_table_for_missing_word(self):
        store = ProbingStore(capacity=2)
        store.insert(WordFrequency("alpha", 1, 0))
        store.insert(WordFrequency("beta", 1, 0))
        assert store.lookup("gamma") is None

    def test_full_table_raises_without_logging(self, caplog):
        store = ProbingStore(capacity=1)
        store.insert(WordFrequency("alpha", 1, 0))

        with pytest.raises(CapacityError):
            store.insert(WordFrequency("beta", 1, 0))
        # Callers decide how to report a refused word
        assert caplog.records == []


def test_backends_agree():
    """Both backends return the same entries for any set that fits."""
    chaining = ChainingStore(capacity=97)
    probing = ProbingStore(capacity=97)
    words = [f"w{i}x" for i in range(90)]

    for i, word in enumerate(words):
        for store in (chaining, probing):
            store.insert(WordFrequency(word, i, 90 - i))
    # Overwrite a few
    for word in words[::7]:
        for store in (chaining, probing):
            store.insert(WordFrequency(word, 0, 0))

    assert chaining.count == probing.count == 90
    for word in words + ["missing", "w90x"]:
        assert chaining.lookup(word) == probing.lookup(word)
