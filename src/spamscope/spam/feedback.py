# =============================================================================
# Feedback Engine
# =============================================================================
# Learns from "Mark as Spam" / "Mark as Ham".
#
# For every token of the labeled message:
#   - known word:   bump exactly one count (spam or ham) by 1
#   - unknown word: create it with (1, 0) or (0, 1) and append it to the
#                   word list
# Every store is written, so mirrors stay in sync. Counts only ever go up.
#
# Once all tokens are applied the whole dataset is saved, so feedback is
# never lost between runs.
# =============================================================================

import logging
from dataclasses import dataclass, field
from pathlib import Path

from spamscope.core import Category, WordFrequency
from spamscope.dataset import Dataset, DatasetCodec
from spamscope.errors import CapacityError
from spamscope.spam.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class FeedbackResult:
    """
    What a feedback call changed.

    Attributes:
        category: The label that was applied.
        created: Words seen for the first time (in order).
        updated: Existing words whose count was bumped, once per occurrence.
        capacity_errors: Store inserts that were refused.
    """
    category: Category
    created: list[str] = field(default_factory=list)
    updated: list[str] = field(default_factory=list)
    capacity_errors: list[CapacityError] = field(default_factory=list)

    @property
    def applied(self) -> int:
        """Number of token occurrences applied."""
        return len(self.created) + len(self.updated)


def apply_feedback(
    tokens: list[str],
    is_spam: bool,
    dataset: Dataset,
    tokenizer: Tokenizer | None = None,
) -> FeedbackResult:
    """
    Apply a user label to a token sequence, in memory only.

    Tokens are re-normalized (normalization is idempotent) so lookups always
    agree with stored keys; tokens that normalize to nothing are skipped.

    Args:
        tokens: Tokens of the labeled message.
        is_spam: True for "spam", False for "ham".
        dataset: Dataset to update.
        tokenizer: Tokenizer providing normalization. Creates default if None.

    Returns:
        FeedbackResult describing the changes.
    """
    tokenizer = tokenizer or Tokenizer()
    category = Category.SPAM if is_spam else Category.HAM
    result = FeedbackResult(category=category)

    for word in tokenizer.normalize(tokens):
        existing = dataset.lookup(word)
        if existing is None:
            entry = WordFrequency.first_seen(word, category)
        else:
            entry = existing.incremented(category)
        result.capacity_errors.extend(dataset.add(entry))

        if word not in dataset:
            # Refused by the primary store
            continue
        if existing is None:
            result.created.append(word)
        else:
            result.updated.append(word)

    for problem in result.capacity_errors:
        logger.warning(str(problem))
    logger.info(
        f"Applied {category.value} feedback: {len(result.created)} new, "
        f"{len(result.updated)} updated"
    )
    return result


class FeedbackEngine:
    """
    Applies feedback and persists the dataset afterwards.

    Usage:
        >>> engine = FeedbackEngine(dataset, DatasetCodec(), Path("dataset.csv"))
        >>> result = engine.apply(["free", "money"], is_spam=True)
        >>> result.created
        ['money']

    Attributes:
        dataset: Dataset being trained.
        codec: Codec used to save after each call.
        path: Dataset file.
    """

    def __init__(
        self,
        dataset: Dataset,
        codec: DatasetCodec,
        path: Path,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.dataset = dataset
        self.codec = codec
        self.path = Path(path)
        self.tokenizer = tokenizer or Tokenizer()

    def apply(self, tokens: list[str], is_spam: bool) -> FeedbackResult:
        """
        Apply a label and save the dataset.

        Raises:
            DatasetFileError: If saving fails. The in-memory update stays.
        """
        result = apply_feedback(tokens, is_spam, self.dataset, self.tokenizer)
        self.codec.save(self.path, self.dataset.words, self.dataset.primary)
        return result
