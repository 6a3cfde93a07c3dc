# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the spamscope test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from spamscope.core import WordFrequency
from spamscope.dataset import Dataset


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_entries():
    """The two-word example dataset: one spammy word, one hammy word."""
    return [
        WordFrequency("free", spam_count=9, ham_count=1),
        WordFrequency("meeting", spam_count=1, ham_count=9),
    ]


@pytest.fixture
def sample_dataset(sample_entries):
    """A small Dataset holding the example entries."""
    dataset = Dataset(capacity=101)
    dataset.replace_with(sample_entries)
    return dataset


@pytest.fixture
def sample_csv():
    """The example dataset as it appears on disk."""
    return '"free","meeting"\n9,1\n1,9\n'


@pytest.fixture
def dataset_file(temp_dir, sample_csv):
    """Write the example dataset to a file and return its path."""
    path = temp_dir / "dataset.csv"
    path.write_text(sample_csv, encoding="utf-8")
    return path


@pytest.fixture
def sample_spam_email():
    """A spammy email body."""
    return """
    CONGRATULATIONS!!! You have been selected for a FREE prize!!!

    Click here NOW to claim it. This offer is FREE, FREE, FREE.
    """


@pytest.fixture
def sample_ham_email():
    """An ordinary work email body."""
    return """
    Hi team,

    The meeting is moved to Thursday. Agenda to follow.
    """
