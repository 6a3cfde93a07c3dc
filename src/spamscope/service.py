# =============================================================================
# Spam Filter Service
# =============================================================================
# The one object the presentation layer talks to.
#
# It owns the explicit context every operation needs - dataset, codec,
# classifier, feedback engine and dataset path - so nothing in spamscope
# depends on globals or hardcoded paths.
#
#   startup:   load()         DatasetCodec -> Dataset
#   classify:  classify()     Dataset.primary -> Classification
#   feedback:  apply_feedback Dataset mutated, then saved via DatasetCodec
#   inspect:   query(), dataset_stats()
# =============================================================================

import logging
from collections.abc import Iterator
from pathlib import Path

from spamscope.config import Config
from spamscope.dataset import (
    Dataset,
    DatasetCodec,
    DatasetStats,
    LoadReport,
    QueryRow,
    SortKey,
    WordFilter,
    dataset_stats,
    query,
)
from spamscope.errors import DatasetFileError, DatasetFormatError, FileAccessError
from spamscope.spam import (
    Classification,
    Classifier,
    Contribution,
    FeedbackEngine,
    FeedbackResult,
    Tokenizer,
    parse_threshold,
)

logger = logging.getLogger(__name__)


class SpamFilterService:
    """
    Facade over the spamscope core.

    Usage:
        >>> service = SpamFilterService(Config.load())
        >>> service.load()
        >>> result = service.classify_text("FREE money, act now")
        >>> service.apply_feedback(service.tokenize("FREE money"), is_spam=True)
        >>> service.set_threshold("0.6")

    Attributes:
        config: Configuration the service was built from.
        dataset_path: Where the dataset is loaded from and saved to.
        dataset: The in-memory dataset.
        classifier: Classifier bound to the primary store.
        save_blocked_by: Load error that disabled saving, or None.
    """

    def __init__(self, config: Config | None = None, dataset_path: Path | None = None) -> None:
        """
        Initialize the service. Nothing is read from disk until load().

        Args:
            config: Configuration. Uses defaults if None.
            dataset_path: Overrides the configured dataset path.
        """
        self.config = config or Config()
        self.dataset_path = Path(dataset_path) if dataset_path else self.config.dataset.resolved_path()

        self.tokenizer = Tokenizer()
        self.codec = DatasetCodec()
        self.dataset = Dataset(capacity=self.config.store.capacity)
        self.classifier = Classifier(
            self.dataset.primary,
            threshold=self.config.spam.threshold,
            tokenizer=self.tokenizer,
        )
        self.feedback = FeedbackEngine(self.dataset, self.codec, self.dataset_path, self.tokenizer)

        # Why the dataset file must not be overwritten, if it failed to load
        self.save_blocked_by: str | None = None

    # -------------------------------------------------------------------------
    # Dataset lifecycle
    # -------------------------------------------------------------------------

    def load(self) -> LoadReport:
        """
        Load the dataset file.

        A file that exists but fails to load is never overwritten afterwards:
        save() and apply_feedback() raise DatasetFileError until a later
        load() succeeds. A missing file is fine; the first save creates it.

        Raises:
            DatasetFileError: If the file is missing or unreadable.
            DatasetFormatError: If the file's lines don't line up.
        """
        try:
            report = self.codec.load(self.dataset_path, self.dataset)
        except (DatasetFileError, DatasetFormatError) as e:
            if self.dataset_path.exists():
                self.save_blocked_by = str(e)
                logger.warning(f"Saving to {self.dataset_path} disabled: {e}")
            raise

        self.save_blocked_by = None
        return report

    def _check_can_save(self) -> None:
        if self.save_blocked_by is not None:
            raise DatasetFileError(
                f"Not overwriting {self.dataset_path}: it failed to load "
                f"({self.save_blocked_by})"
            )

    def save(self) -> None:
        """
        Save the dataset file.

        Raises:
            DatasetFileError: If the file can't be written, or failed to load.
        """
        self._check_can_save()
        self.codec.save(self.dataset_path, self.dataset.words, self.dataset.primary)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def tokenize(self, text: str) -> list[str]:
        """Normalize raw email text into tokens."""
        return self.tokenizer.tokenize(text)

    def classify(self, tokens: list[str]) -> Classification:
        """Classify already-normalized tokens."""
        return self.classifier.classify(tokens)

    def classify_text(self, text: str) -> Classification:
        """Tokenize and classify raw email text."""
        return self.classifier.classify_text(text)

    def contribution(self, word: str) -> Contribution | None:
        """Signed contribution of a single word."""
        return self.classifier.contribution(word)

    def highlight(self, text: str) -> Iterator[tuple[int, int, str, Contribution]]:
        """Tagged word spans in raw text, for highlighting."""
        return self.classifier.highlight(text)

    @property
    def threshold(self) -> float:
        """Current spam threshold."""
        return self.classifier.threshold

    def set_threshold(self, value: float | str) -> float:
        """
        Change the spam threshold.

        Args:
            value: New threshold, as a number or as text typed by the user.

        Returns:
            The threshold now in effect.

        Raises:
            ValidationError: If the value is not a number in [0.0, 1.0].
                             The previous threshold stays in effect.
        """
        if isinstance(value, str):
            value = parse_threshold(value)
        self.classifier.threshold = value
        return self.classifier.threshold

    # -------------------------------------------------------------------------
    # Feedback
    # -------------------------------------------------------------------------

    def apply_feedback(self, tokens: list[str], is_spam: bool) -> FeedbackResult:
        """
        Learn from a user label and persist the dataset.

        Raises:
            DatasetFileError: If the dataset can't be saved. When the file
                              failed to load, nothing is learned either.
        """
        self._check_can_save()
        return self.feedback.apply(tokens, is_spam)

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    def query(
        self,
        word_filter: WordFilter | None = None,
        sort_key: SortKey = SortKey.ALPHABETICAL,
    ) -> list[QueryRow]:
        """Filter and sort the word table."""
        return query(self.dataset, word_filter, sort_key)

    def dataset_stats(self) -> DatasetStats:
        """Summary figures for the "Properties" view."""
        return dataset_stats(self.dataset, self.classifier.threshold)

    # -------------------------------------------------------------------------
    # Email files
    # -------------------------------------------------------------------------

    @staticmethod
    def read_email(path: Path) -> str:
        """
        Read an email from a text file.

        Raises:
            FileAccessError: If the file can't be opened.
        """
        try:
            return Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Could not open email file {path}: {e}")
            raise FileAccessError(f"Could not open file: {path}") from e
