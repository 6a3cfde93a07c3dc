# =============================================================================
# Word Ratio Spam Classifier
# =============================================================================
# Scores a token sequence against the word table.
#
# How it works:
#   1. Look every token up in the store
#   2. Skip tokens we've never seen (or whose counts are both zero)
#   3. For each remaining token take its spam ratio: spam / (spam + ham)
#   4. The message probability is the mean of those ratios
#   5. probability >= threshold means spam
#
# This is not Naive Bayes: no priors, no smoothing. A message
# with no known words scores exactly 0.0.
#
# The same counts also give each word a signed "contribution" in [-1, 1],
# bucketed into five intensity levels for highlighting.
# =============================================================================

import logging
import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from spamscope.errors import ValidationError
from spamscope.spam.tokenizer import Tokenizer
from spamscope.store import WordFrequencyStore

logger = logging.getLogger(__name__)

# Default decision threshold
DEFAULT_THRESHOLD = 0.7

# Width of one contribution level, and the highest level
LEVEL_WIDTH = 0.2
MAX_LEVEL = 5


@dataclass(frozen=True)
class Classification:
    """
    Result of classifying a token sequence.

    Attributes:
        is_spam: True if probability >= threshold.
        probability: Mean spam ratio of matched tokens (0.0 if none matched).
        matched: Number of tokens that contributed to the score.
    """
    is_spam: bool
    probability: float
    matched: int = 0

    @property
    def label(self) -> str:
        """Display label for the result."""
        return "Spam" if self.is_spam else "Not Spam"


class Polarity(Enum):
    """Which way a word's evidence leans."""
    SPAM = "spam"
    HAM = "ham"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class Contribution:
    """
    A single word's signed evidence.

    Attributes:
        score: (spam - ham) / (spam + ham), in [-1, 1].
        level: Intensity 1-5, or 0 when the score is exactly zero.
        polarity: SPAM for positive scores, HAM for negative, NEUTRAL for 0.
    """
    score: float
    level: int
    polarity: Polarity

    @property
    def tag(self) -> str | None:
        """Highlight tag name such as "spam-3", or None for neutral words."""
        if self.polarity is Polarity.NEUTRAL:
            return None
        return f"{self.polarity.value}-{self.level}"


def contribution_level(score: float) -> int:
    """
    Bucket the magnitude of a contribution score into levels 1-5.

    Boundaries sit at multiples of 0.2 and are computed with plain float
    division, so e.g. 0.6 / 0.2 == 2.999... lands in level 3.
    """
    return min(MAX_LEVEL, int(abs(score) / LEVEL_WIDTH) + 1)


def contribution(word: str, store: WordFrequencyStore) -> Contribution | None:
    """
    Compute a word's signed contribution.

    Args:
        word: Normalized word.
        store: Store to read counts from.

    Returns:
        Contribution, or None if the word is unknown or has zero total.
    """
    entry = store.lookup(word)
    if entry is None:
        return None

    total = entry.spam_count + entry.ham_count
    if total <= 0:
        return None

    score = (entry.spam_count - entry.ham_count) / total
    if score > 0:
        return Contribution(score, contribution_level(score), Polarity.SPAM)
    if score < 0:
        return Contribution(score, contribution_level(score), Polarity.HAM)
    return Contribution(0.0, 0, Polarity.NEUTRAL)


def classify(
    tokens: Iterable[str],
    store: WordFrequencyStore,
    threshold: float = DEFAULT_THRESHOLD,
) -> Classification:
    """
    Classify a token sequence.

    Pure function: nothing is mutated.

    Args:
        tokens: Normalized tokens (duplicates are scored every time).
        store: Store to read counts from.
        threshold: Probability at or above which the result is spam.

    Returns:
        Classification with the probability and spam verdict.
    """
    ratio_sum = 0.0
    matched = 0

    for token in tokens:
        entry = store.lookup(token)
        if entry is None:
            continue
        total = entry.spam_count + entry.ham_count
        if total > 0:
            ratio_sum += entry.spam_count / total
            matched += 1

    probability = ratio_sum / matched if matched > 0 else 0.0
    return Classification(probability >= threshold, probability, matched)


def validate_threshold(value: float) -> float:
    """
    Check that a threshold lies within [0.0, 1.0].

    Raises:
        ValidationError: If the value is out of range or not a number.
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError("Invalid threshold value") from e
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValidationError("Threshold must be between 0.0 and 1.0")
    return value


def parse_threshold(text: str) -> float:
    """
    Parse a threshold typed by the user.

    Raises:
        ValidationError: If the text is not a number in [0.0, 1.0].
    """
    try:
        value = float(text.strip())
    except ValueError as e:
        raise ValidationError("Invalid threshold value") from e
    return validate_threshold(value)


class Classifier:
    """
    Classifier bound to a store and a mutable threshold.

    Usage:
        >>> classifier = Classifier(store, threshold=0.7)
        >>> result = classifier.classify(["free", "money"])
        >>> if result.is_spam:
        ...     print(f"Spam ({result.probability:.2f})")
        >>> classifier.threshold = 0.5

    Attributes:
        store: Store the classifier reads from.
        tokenizer: Tokenizer used by classify_text and highlight.
    """

    def __init__(
        self,
        store: WordFrequencyStore,
        threshold: float = DEFAULT_THRESHOLD,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            store: Store to read counts from.
            threshold: Initial decision threshold in [0.0, 1.0].
            tokenizer: Tokenizer instance. Creates default if None.

        Raises:
            ValidationError: If the threshold is out of range.
        """
        self.store = store
        self.tokenizer = tokenizer or Tokenizer()
        self._threshold = validate_threshold(threshold)

    @property
    def threshold(self) -> float:
        """Current decision threshold."""
        return self._threshold

    @threshold.setter
    def threshold(self, value: float) -> None:
        # Rejected values leave the previous threshold in place
        self._threshold = validate_threshold(value)
        logger.debug(f"Spam threshold set to {self._threshold}")

    def classify(self, tokens: Iterable[str]) -> Classification:
        """Classify normalized tokens against the bound store."""
        return classify(tokens, self.store, self._threshold)

    def classify_text(self, text: str) -> Classification:
        """Tokenize raw text and classify it."""
        return self.classify(self.tokenizer.tokenize(text))

    def contribution(self, word: str) -> Contribution | None:
        """Signed contribution of one word."""
        return contribution(word, self.store)

    def highlight(self, text: str) -> Iterator[tuple[int, int, str, Contribution]]:
        """
        Find the words in ``text`` that carry a spam or ham tag.

        Yields:
            (start, end, word, contribution) for each tagged word.
        """
        for span in self.tokenizer.spans(text):
            result = contribution(span.word, self.store)
            if result is None or result.tag is None:
                continue
            logger.debug(
                f"Word: {span.word}, contribution: {result.score:.3f}, "
                f"{result.polarity.value} level: {result.level}"
            )
            yield span.start, span.end, span.word, result
