# =============================================================================
# Transposed CSV Dataset Codec
# =============================================================================
# Reads and writes the word table as a "transposed" CSV: one column per word,
# one row per attribute.
#
#   "free","meeting","offer"
#   9,1,14
#   1,9,2
#
# Line 1 holds the quoted words, line 2 the spam counts, line 3 the ham
# counts. Columns line up strictly by position.
#
# Loading is all-or-nothing for file and shape problems (DatasetFileError,
# DatasetFormatError): the file is fully parsed before the dataset is
# touched. A column whose counts don't parse is skipped and reported, the
# rest of the file still loads.
# =============================================================================

import logging
import math
import os
from dataclasses import dataclass, field
from pathlib import Path

from spamscope.core import WordFrequency
from spamscope.dataset.model import Dataset
from spamscope.errors import CapacityError, DatasetFileError, DatasetFormatError
from spamscope.store import WordFrequencyStore

logger = logging.getLogger(__name__)

# Header cell some exports put in the first column. Never a real word.
HEADER_SENTINEL = "word"


@dataclass(frozen=True)
class ColumnError:
    """
    A column that could not be loaded.

    Attributes:
        column: 1-based column position in the file.
        word: The word in that column's header cell.
        reason: Why the column was skipped.
    """
    column: int
    word: str
    reason: str

    def __str__(self) -> str:
        return f"Error processing column {self.column}: {self.word} ({self.reason})"


@dataclass
class LoadReport:
    """
    Outcome of a successful load.

    Attributes:
        path: File that was loaded.
        loaded: Number of columns inserted.
        skipped: Number of blank or header-sentinel columns ignored.
        column_errors: Columns dropped because their counts were invalid.
        capacity_errors: Inserts a bounded store had to refuse.
    """
    path: Path
    loaded: int = 0
    skipped: int = 0
    column_errors: list[ColumnError] = field(default_factory=list)
    capacity_errors: list[CapacityError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if nothing had to be dropped."""
        return not self.column_errors and not self.capacity_errors


def split_fields(line: str) -> list[str]:
    """
    Split one CSV line on commas, stripping one layer of double quotes.

    An empty line has no fields, and a single trailing comma does not
    produce an extra empty field.
    """
    line = line.rstrip("\r\n")
    if not line:
        return []
    if line.endswith(","):
        line = line[:-1]

    fields = []
    for cell in line.split(","):
        if len(cell) >= 2 and cell[0] == '"' and cell[-1] == '"':
            cell = cell[1:-1]
        fields.append(cell)
    return fields


def parse_count(text: str) -> float:
    """
    Parse one count cell.

    Raises:
        ValueError: If the cell is not a finite, non-negative number.
    """
    if "_" in text:
        raise ValueError(f"digit separators are not allowed: {text!r}")
    value = float(text)
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"count is not finite: {text!r}")
    if value < 0:
        raise ValueError(f"count is negative: {text!r}")
    return value


def format_count(value: float) -> str:
    """Format a count so that parse_count gives back the exact value."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


class DatasetCodec:
    """
    Loads and saves the transposed CSV dataset file.

    Usage:
        >>> codec = DatasetCodec()
        >>> report = codec.load(Path("dataset.csv"), dataset)
        >>> for problem in report.column_errors:
        ...     print(problem)
        >>> codec.save(Path("dataset.csv"), dataset.words, dataset.primary)
    """

    encoding = "utf-8"
    # Bytes that aren't UTF-8 survive a load/save cycle unchanged
    errors = "surrogateescape"

    def read(self, path: Path) -> tuple[list[WordFrequency], list[ColumnError], int]:
        """
        Parse a dataset file without touching any dataset.

        Args:
            path: File to read.

        Returns:
            (entries in column order, column errors, skipped column count)

        Raises:
            DatasetFileError: If the file can't be opened.
            DatasetFormatError: If the three lines have differing field counts.
        """
        try:
            text = Path(path).read_text(encoding=self.encoding, errors=self.errors)
        except OSError as e:
            raise DatasetFileError(f"Error opening file: {path}: {e}") from e

        return self.parse(text)

    def parse(self, text: str) -> tuple[list[WordFrequency], list[ColumnError], int]:
        """Parse dataset text. See ``read``."""
        lines = text.split("\n")[:3]
        lines += [""] * (3 - len(lines))

        words, spam_cells, ham_cells = (split_fields(line) for line in lines)
        if not len(words) == len(spam_cells) == len(ham_cells):
            raise DatasetFormatError(
                "Inconsistent number of columns in dataset: "
                f"{len(words)} words, {len(spam_cells)} spam counts, {len(ham_cells)} ham counts"
            )

        entries = []
        errors = []
        skipped = 0
        for index, (word, spam_cell, ham_cell) in enumerate(zip(words, spam_cells, ham_cells)):
            if not word or word.lower() == HEADER_SENTINEL:
                skipped += 1
                continue
            try:
                entries.append(WordFrequency(word, parse_count(spam_cell), parse_count(ham_cell)))
            except ValueError as e:
                errors.append(ColumnError(index + 1, word, str(e)))

        return entries, errors, skipped

    def load(self, path: Path, dataset: Dataset) -> LoadReport:
        """
        Load a dataset file, replacing the dataset's content.

        On DatasetFileError or DatasetFormatError the dataset is left exactly
        as it was.

        Args:
            path: File to read.
            dataset: Dataset to populate.

        Returns:
            LoadReport describing what was loaded and what was dropped.
        """
        path = Path(path)
        entries, column_errors, skipped = self.read(path)

        capacity_errors = dataset.replace_with(entries)
        report = LoadReport(
            path=path,
            loaded=len(entries),
            skipped=skipped,
            column_errors=column_errors,
            capacity_errors=capacity_errors,
        )

        for problem in column_errors:
            logger.warning(str(problem))
        for problem in capacity_errors:
            logger.warning(str(problem))
        logger.info(
            f"Loaded {report.loaded} words from {path} "
            f"({len(column_errors)} bad columns, {len(capacity_errors)} capacity errors)"
        )
        return report

    def dumps(self, words: list[str], store: WordFrequencyStore) -> str:
        """Render the three dataset lines for ``words`` as stored in ``store``."""
        header = []
        spam_row = []
        ham_row = []
        for word in words:
            entry = store.lookup(word)
            header.append(f'"{word}"')
            spam_row.append(format_count(entry.spam_count) if entry else "0")
            ham_row.append(format_count(entry.ham_count) if entry else "0")

        return "\n".join([",".join(header), ",".join(spam_row), ",".join(ham_row)]) + "\n"

    def save(self, path: Path, words: list[str], store: WordFrequencyStore) -> None:
        """
        Write the dataset file.

        The new content goes to a temporary sibling first and is then moved
        over the old file, so a failed write leaves the old file intact.

        Raises:
            DatasetFileError: If the file can't be written.
        """
        path = Path(path)
        content = self.dumps(words, store)
        tmp_path = path.with_name(path.name + ".tmp")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding=self.encoding, errors=self.errors, newline="\n") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise DatasetFileError(f"Error opening file for writing: {path}: {e}") from e

        logger.info(f"Saved {len(words)} words to {path}")
