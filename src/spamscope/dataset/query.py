# =============================================================================
# Dataset Query Engine
# =============================================================================
# Filter + sort over the whole word set, for inspecting the dataset.
#
# A filter combines independently optional predicates (all must pass):
#   - substring match on the lowercased word
#   - spam count  above/below a threshold (inclusive)
#   - ham count   above/below a threshold (inclusive)
#   - spam score  above/below a threshold (inclusive)
#   - ham score   above/below a threshold (inclusive)
#
# Numeric predicates come from text fields. A blank field means "no
# predicate" - a field containing "0" is an active predicate with value 0.
#
# Sorting is stable, so ties keep dataset (word-list) order.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from spamscope.core import WordFrequency
from spamscope.dataset.model import Dataset
from spamscope.errors import ValidationError


class QueryRow(NamedTuple):
    """One row of query output."""
    word: str
    spam_count: float
    ham_count: float
    total: float


class Direction(Enum):
    """Comparison direction for a numeric predicate (both inclusive)."""
    ABOVE = "above"
    BELOW = "below"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        """Parse "above"/"below" (case-insensitive)."""
        try:
            return cls(text.strip().lower())
        except ValueError as e:
            raise ValidationError(f"Direction must be 'above' or 'below', got {text!r}") from e


class SortKey(Enum):
    """Sort orders for query results."""
    ALPHABETICAL = "alphabetical"
    SPAM_COUNT = "spam_count"
    HAM_COUNT = "ham_count"
    SPAM_SCORE = "spam_score"
    HAM_SCORE = "ham_score"

    @property
    def label(self) -> str:
        """Display label, e.g. "Spam Count"."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class NumericPredicate:
    """
    An inclusive threshold test.

    Attributes:
        threshold: Value to compare against.
        direction: ABOVE means value >= threshold, BELOW means value <= threshold.
    """
    threshold: float
    direction: Direction = Direction.ABOVE

    def matches(self, value: float) -> bool:
        if self.direction is Direction.ABOVE:
            return value >= self.threshold
        return value <= self.threshold

    @classmethod
    def parse(
        cls,
        text: str,
        direction: Direction = Direction.ABOVE,
        field_name: str = "threshold",
    ) -> "NumericPredicate | None":
        """
        Build a predicate from a text field.

        Returns:
            None if the text is blank, otherwise the predicate.

        Raises:
            ValidationError: If the text is not a number.
        """
        if not text.strip():
            return None
        try:
            threshold = float(text)
        except ValueError as e:
            raise ValidationError(f"Invalid {field_name} value: {text!r}") from e
        return cls(threshold, direction)


@dataclass(frozen=True)
class WordFilter:
    """
    Composite filter over dataset entries. Unset parts are inactive.

    Example:
        >>> WordFilter(spam_count=NumericPredicate(5, Direction.ABOVE))
    """
    substring: str = ""
    spam_count: NumericPredicate | None = None
    ham_count: NumericPredicate | None = None
    spam_score: NumericPredicate | None = None
    ham_score: NumericPredicate | None = None

    def matches(self, entry: WordFrequency) -> bool:
        """True if every active predicate accepts ``entry``."""
        if self.substring and self.substring.lower() not in entry.word.lower():
            return False

        checks = (
            (self.spam_count, entry.spam_count),
            (self.ham_count, entry.ham_count),
            (self.spam_score, entry.spam_score),
            (self.ham_score, entry.ham_score),
        )
        return all(predicate is None or predicate.matches(value) for predicate, value in checks)

    @classmethod
    def from_text(
        cls,
        substring: str = "",
        spam_count: str = "",
        ham_count: str = "",
        spam_score: str = "",
        ham_score: str = "",
        spam_count_direction: str = "above",
        ham_count_direction: str = "above",
        spam_score_direction: str = "above",
        ham_score_direction: str = "above",
    ) -> "WordFilter":
        """
        Build a filter from raw form fields.

        Raises:
            ValidationError: If a non-blank numeric field doesn't parse.
        """
        return cls(
            substring=substring.strip(),
            spam_count=NumericPredicate.parse(
                spam_count, Direction.parse(spam_count_direction), "spam count"
            ),
            ham_count=NumericPredicate.parse(
                ham_count, Direction.parse(ham_count_direction), "ham count"
            ),
            spam_score=NumericPredicate.parse(
                spam_score, Direction.parse(spam_score_direction), "spam score"
            ),
            ham_score=NumericPredicate.parse(
                ham_score, Direction.parse(ham_score_direction), "ham score"
            ),
        )


# Sort key -> (key function, descending)
_SORTS = {
    SortKey.ALPHABETICAL: (lambda e: e.word, False),
    SortKey.SPAM_COUNT: (lambda e: e.spam_count, True),
    SortKey.HAM_COUNT: (lambda e: e.ham_count, True),
    SortKey.SPAM_SCORE: (lambda e: e.spam_score, True),
    SortKey.HAM_SCORE: (lambda e: e.ham_score, True),
}


def query(
    dataset: Dataset,
    word_filter: WordFilter | None = None,
    sort_key: SortKey = SortKey.ALPHABETICAL,
) -> list[QueryRow]:
    """
    Filter and sort the dataset.

    Args:
        dataset: Dataset to read (word-list order, primary store counts).
        word_filter: Filter to apply. None matches everything.
        sort_key: Result ordering.

    Returns:
        Matching rows in the requested order.
    """
    word_filter = word_filter or WordFilter()
    matched = [entry for entry in dataset.entries() if word_filter.matches(entry)]

    key, descending = _SORTS[sort_key]
    # sorted() is stable in both directions
    matched = sorted(matched, key=key, reverse=descending)

    return [QueryRow(e.word, e.spam_count, e.ham_count, e.total) for e in matched]
