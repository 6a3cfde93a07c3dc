# =============================================================================
# Errors
# =============================================================================
# Exception hierarchy shared by every spamscope module.
#
# Two kinds of failure exist:
#   - Fatal: the whole operation aborts and leaves state untouched
#     (FileAccessError, DatasetFormatError, ValidationError, ConfigError).
#   - Per-item: one entry fails, the surrounding batch keeps going and
#     collects the failure (CapacityError; column parse problems are
#     recorded as ColumnError records in spamscope.dataset.codec).
# =============================================================================


class SpamScopeError(Exception):
    """Base exception for all spamscope operations."""
    pass


class FileAccessError(SpamScopeError):
    """Raised when a file is missing, unreadable or unwritable."""
    pass


class DatasetFileError(FileAccessError):
    """Raised when the dataset file can't be read or written."""
    pass


class DatasetFormatError(SpamScopeError):
    """Raised when the three dataset lines have differing field counts."""
    pass


class CapacityError(SpamScopeError):
    """
    Raised when an open-addressing store has no free slot for a new word.

    Attributes:
        word: The word that could not be inserted.
        capacity: Capacity of the store that rejected it.
    """

    def __init__(self, word: str, capacity: int) -> None:
        super().__init__(f"Hash table is full ({capacity} slots): cannot insert {word!r}")
        self.word = word
        self.capacity = capacity


class ValidationError(SpamScopeError):
    """Raised when user-supplied input (threshold, filter field) is invalid."""
    pass


class ConfigError(SpamScopeError):
    """Raised when there's an error loading or parsing configuration."""
    pass
