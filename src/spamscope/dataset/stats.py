# =============================================================================
# Dataset Statistics
# =============================================================================
# Summary numbers shown in the "Properties" view.
# =============================================================================

from dataclasses import dataclass

from spamscope.dataset.model import Dataset


@dataclass(frozen=True)
class DatasetStats:
    """
    Summary of the current dataset.

    Attributes:
        total_words: Distinct words in the primary store.
        total_spam_freq: Sum of all spam counts.
        total_ham_freq: Sum of all ham counts.
        dominant_category: "Spam", "Ham" or "Equal".
        load_factor: Primary store load factor.
        top_spam_word: Word with the highest spam count (None if all zero).
        top_spam_count: Its spam count.
        top_ham_word: Word with the highest ham count (None if all zero).
        top_ham_count: Its ham count.
        threshold: Current classification threshold.
    """
    total_words: int
    total_spam_freq: float
    total_ham_freq: float
    dominant_category: str
    load_factor: float
    top_spam_word: str | None
    top_spam_count: float
    top_ham_word: str | None
    top_ham_count: float
    threshold: float

    def lines(self) -> list[str]:
        """Human-readable lines, one per figure."""
        return [
            f"Total Unique Words: {self.total_words}",
            f"Total Spam Frequency: {self.total_spam_freq:g}",
            f"Total Ham Frequency: {self.total_ham_freq:g}",
            f"Dominant Category: {self.dominant_category}",
            f"Hash Map Load Factor: {self.load_factor:.4f}",
            f"Most Frequent Spam Word: {self.top_spam_word or 'None'} ({self.top_spam_count:g})",
            f"Most Frequent Ham Word: {self.top_ham_word or 'None'} ({self.top_ham_count:g})",
            f"Current Spam Threshold: {self.threshold:g}",
        ]


def dataset_stats(dataset: Dataset, threshold: float) -> DatasetStats:
    """
    Compute statistics for a dataset.

    Ties for the top words go to the word that comes first in the word list.
    """
    total_spam = 0.0
    total_ham = 0.0
    top_spam_word, top_spam = None, 0.0
    top_ham_word, top_ham = None, 0.0

    for entry in dataset.entries():
        total_spam += entry.spam_count
        total_ham += entry.ham_count
        if entry.spam_count > top_spam:
            top_spam_word, top_spam = entry.word, entry.spam_count
        if entry.ham_count > top_ham:
            top_ham_word, top_ham = entry.word, entry.ham_count

    if total_spam > total_ham:
        dominant = "Spam"
    elif total_ham > total_spam:
        dominant = "Ham"
    else:
        dominant = "Equal"

    return DatasetStats(
        total_words=dataset.primary.count,
        total_spam_freq=total_spam,
        total_ham_freq=total_ham,
        dominant_category=dominant,
        load_factor=dataset.primary.load_factor,
        top_spam_word=top_spam_word,
        top_spam_count=top_spam,
        top_ham_word=top_ham_word,
        top_ham_count=top_ham,
        threshold=threshold,
    )
