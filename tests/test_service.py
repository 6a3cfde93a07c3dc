# =============================================================================
# Service Tests
# =============================================================================
# The facade the UI and CLI talk to.
# =============================================================================

import pytest

from spamscope.config import Config
from spamscope.dataset import DatasetCodec, Dataset, SortKey, WordFilter
from spamscope.errors import DatasetFileError, DatasetFormatError, FileAccessError, ValidationError
from spamscope.service import SpamFilterService


@pytest.fixture
def service(dataset_file):
    """A service loaded from the example dataset file."""
    service = SpamFilterService(Config(), dataset_path=dataset_file)
    service.load()
    return service


def test_dataset_path_from_config(temp_dir):
    config = Config()
    config.dataset.path = str(temp_dir / "configured.csv")
    assert SpamFilterService(config).dataset_path == temp_dir / "configured.csv"


def test_dataset_path_override_wins(temp_dir):
    config = Config()
    config.dataset.path = str(temp_dir / "configured.csv")
    service = SpamFilterService(config, dataset_path=temp_dir / "override.csv")
    assert service.dataset_path == temp_dir / "override.csv"


def test_capacity_and_threshold_from_config(temp_dir):
    config = Config()
    config.store.capacity = 53
    config.spam.threshold = 0.4
    service = SpamFilterService(config, dataset_path=temp_dir / "x.csv")

    assert service.dataset.primary.capacity == 53
    assert service.threshold == 0.4


def test_load_missing_file(temp_dir):
    service = SpamFilterService(Config(), dataset_path=temp_dir / "missing.csv")
    with pytest.raises(DatasetFileError):
        service.load()
    assert len(service.dataset) == 0


def test_classify(service, sample_spam_email, sample_ham_email):
    assert service.classify(["free"]).is_spam
    assert service.classify_text(sample_spam_email).is_spam
    assert not service.classify_text(sample_ham_email).is_spam
    assert service.classify_text("").probability == 0.0


def test_contribution_and_highlight(service):
    assert service.contribution("free").score == pytest.approx(0.8)
    assert service.contribution("nope") is None
    assert [word for _, _, word, _ in service.highlight("free lunch at the meeting")] == [
        "free",
        "meeting",
    ]


def test_set_threshold(service):
    assert service.set_threshold("0.5") == 0.5
    assert service.classify(["free", "meeting"]).is_spam

    assert service.set_threshold(0.95) == 0.95
    assert not service.classify(["free"]).is_spam


def test_set_threshold_invalid_keeps_previous(service):
    for value in ("abc", "1.2", -1.0):
        with pytest.raises(ValidationError):
            service.set_threshold(value)
    assert service.threshold == 0.7


def test_apply_feedback_persists(service, dataset_file):
    result = service.apply_feedback(service.tokenize("FREE prize!"), is_spam=True)
    assert result.created == ["prize"]

    reloaded = Dataset(capacity=101)
    DatasetCodec().load(dataset_file, reloaded)
    assert reloaded.words == ["free", "meeting", "prize"]
    assert reloaded.lookup("free").spam_count == 10


def test_query_and_stats(service):
    rows = service.query(WordFilter.from_text(spam_count="5"), SortKey.SPAM_COUNT)
    assert [row.word for row in rows] == ["free"]

    service.set_threshold(0.6)
    stats = service.dataset_stats()
    assert stats.total_words == 2
    assert stats.threshold == 0.6


def test_save(service, temp_dir):
    service.dataset_path = temp_dir / "copy.csv"
    service.save()
    assert (temp_dir / "copy.csv").read_text(encoding="utf-8").startswith('"free","meeting"')


def test_read_email(temp_dir):
    path = temp_dir / "mail.txt"
    path.write_text("Hello there", encoding="utf-8")
    assert SpamFilterService.read_email(path) == "Hello there"


def test_read_email_missing(temp_dir):
    with pytest.raises(FileAccessError):
        SpamFilterService.read_email(temp_dir / "missing.txt")


# =============================================================================
# A dataset file that fails to load is never overwritten
# =============================================================================

MALFORMED = b'"a","b"\n1\n1,2\n'


def test_malformed_file_blocks_feedback_and_save(temp_dir):
    path = temp_dir / "dataset.csv"
    path.write_bytes(MALFORMED)
    service = SpamFilterService(Config(), dataset_path=path)

    with pytest.raises(DatasetFormatError):
        service.load()
    assert service.save_blocked_by

    with pytest.raises(DatasetFileError):
        service.apply_feedback(["free", "prize"], is_spam=True)
    with pytest.raises(DatasetFileError):
        service.save()

    assert path.read_bytes() == MALFORMED
    assert len(service.dataset) == 0


def test_missing_file_does_not_block_feedback(temp_dir):
    path = temp_dir / "missing.csv"
    service = SpamFilterService(Config(), dataset_path=path)
    with pytest.raises(DatasetFileError):
        service.load()
    assert service.save_blocked_by is None

    service.apply_feedback(["prize"], is_spam=True)
    assert path.read_text(encoding="utf-8") == '"prize"\n1\n0\n'


def test_successful_reload_clears_the_block(temp_dir, sample_csv):
    path = temp_dir / "dataset.csv"
    path.write_bytes(MALFORMED)
    service = SpamFilterService(Config(), dataset_path=path)
    with pytest.raises(DatasetFormatError):
        service.load()

    path.write_text(sample_csv, encoding="utf-8")
    service.load()
    assert service.save_blocked_by is None

    service.apply_feedback(["free"], is_spam=True)
    assert service.dataset.lookup("free").spam_count == 10


def test_latin1_dataset_survives_feedback(temp_dir):
    path = temp_dir / "dataset.csv"
    path.write_bytes(b'"caf\xe9","free"\n3,9\n1,1\n')
    service = SpamFilterService(Config(), dataset_path=path)
    service.load()

    service.apply_feedback(["free"], is_spam=True)
    assert path.read_bytes() == b'"caf\xe9","free"\n3,10\n1,1\n'
