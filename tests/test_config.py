# =============================================================================
# Configuration Tests
# =============================================================================

import pytest

from spamscope.config import (
    Config,
    ConfigError,
    DatasetConfig,
    ensure_directories,
    get_xdg_config_home,
    get_xdg_data_home,
)
from spamscope.spam.classifier import DEFAULT_THRESHOLD
from spamscope.store import DEFAULT_CAPACITY


@pytest.fixture
def xdg_home(temp_dir, monkeypatch):
    """Point every XDG base directory into the temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(temp_dir / "data"))
    monkeypatch.setenv("XDG_STATE_HOME", str(temp_dir / "state"))
    return temp_dir


def test_defaults_when_file_missing(temp_dir):
    config = Config.load(temp_dir / "missing.toml")

    assert config.spam.threshold == DEFAULT_THRESHOLD
    assert config.store.capacity == DEFAULT_CAPACITY
    assert config.dataset.path == ""
    assert config.ui.theme == "dark"


def test_save_and_load(temp_dir):
    path = temp_dir / "config.toml"
    config = Config()
    config.dataset.path = str(temp_dir / "words.csv")
    config.store.capacity = 503
    config.spam.threshold = 0.55
    config.ui.theme = "light"
    config.save(path)

    loaded = Config.load(path)
    assert loaded.dataset.resolved_path() == temp_dir / "words.csv"
    assert loaded.store.capacity == 503
    assert loaded.spam.threshold == 0.55
    assert loaded.ui.theme == "light"


def test_partial_file_keeps_defaults(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[spam]\nthreshold = 0.9\n")

    config = Config.load(path)
    assert config.spam.threshold == 0.9
    assert config.store.capacity == DEFAULT_CAPACITY


def test_integer_threshold_is_accepted(temp_dir):
    path = temp_dir / "config.toml"
    path.write_text("[spam]\nthreshold = 1\n")
    assert Config.load(path).spam.threshold == 1.0


@pytest.mark.parametrize(
    "content",
    [
        "this is not toml",
        "[spam]\nthreshold = 1.5\n",
        "[spam]\nthreshold = \"high\"\n",
        "[store]\ncapacity = 0\n",
        "[store]\ncapacity = 2.5\n",
    ],
)
def test_invalid_file(temp_dir, content):
    path = temp_dir / "config.toml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        Config.load(path)


def test_xdg_paths(xdg_home):
    assert get_xdg_config_home() == xdg_home / "config" / "spamscope"
    assert Config.config_file_path() == xdg_home / "config" / "spamscope" / "config.toml"
    assert Config.default_dataset_path() == xdg_home / "data" / "spamscope" / "dataset.csv"
    assert Config.log_file_path() == xdg_home / "state" / "spamscope" / "spamscope.log"


def test_default_dataset_path_used_when_unset(xdg_home):
    assert DatasetConfig().resolved_path() == get_xdg_data_home() / "dataset.csv"


def test_ensure_directories(xdg_home):
    dirs = ensure_directories()
    assert set(dirs) == {"config", "data", "state"}
    for path in dirs.values():
        assert path.is_dir()
