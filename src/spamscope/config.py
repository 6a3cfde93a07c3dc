# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating spamscope configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/spamscope/  (default: ~/.config/spamscope/)
#   - Data:    $XDG_DATA_HOME/spamscope/    (default: ~/.local/share/spamscope/)
#   - State:   $XDG_STATE_HOME/spamscope/   (default: ~/.local/state/spamscope/)
#
# Files:
#   - config.toml: User configuration (dataset path, threshold, capacity)
#   - dataset.csv: The word table (in data directory, unless configured)
#   - spamscope.log: Debug log (in state directory, only with --debug)
# =============================================================================

import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)

from spamscope.errors import ConfigError
from spamscope.spam.classifier import DEFAULT_THRESHOLD
from spamscope.store import DEFAULT_CAPACITY


# =============================================================================
# XDG Directory Management
# =============================================================================

# Application identifier used in all XDG paths
APP_NAME = "spamscope"


def _xdg_dir(env_var: str, *fallback: str) -> Path:
    """Resolve an XDG base directory for spamscope."""
    value = os.environ.get(env_var)
    base = Path(value) if value else Path.home().joinpath(*fallback)
    return base / APP_NAME


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for spamscope.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/spamscope/
    """
    return _xdg_dir("XDG_CONFIG_HOME", ".config")


def get_xdg_data_home() -> Path:
    """
    Returns the XDG data directory for spamscope.

    Respects $XDG_DATA_HOME if set, otherwise uses ~/.local/share/spamscope/
    This is where the dataset lives by default.
    """
    return _xdg_dir("XDG_DATA_HOME", ".local", "share")


def get_xdg_state_home() -> Path:
    """
    Returns the XDG state directory for spamscope.

    Respects $XDG_STATE_HOME if set, otherwise uses ~/.local/state/spamscope/
    """
    return _xdg_dir("XDG_STATE_HOME", ".local", "state")


_DIRECTORY_GETTERS = {
    "config": get_xdg_config_home,
    "data": get_xdg_data_home,
    "state": get_xdg_state_home,
}


def ensure_directories() -> dict[str, Path]:
    """
    Make sure the config, data and state directories exist.

    Returns:
        {"config": ..., "data": ..., "state": ...} paths.
    """
    dirs = {kind: getter() for kind, getter in _DIRECTORY_GETTERS.items()}
    for dir_path in dirs.values():
        dir_path.mkdir(parents=True, exist_ok=True)
    return dirs


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class DatasetConfig:
    """
    Where the word table lives.

    Attributes:
        path: Dataset CSV path. Empty means the XDG data default.
    """
    path: str = ""

    def resolved_path(self) -> Path:
        """The dataset path with ~ expanded and the default applied."""
        if self.path:
            return Path(self.path).expanduser()
        return Config.default_dataset_path()


@dataclass
class StoreConfig:
    """
    Configuration for the in-memory hash tables.

    Attributes:
        capacity: Bucket/slot count for both stores. Fixed for the lifetime
                  of a run; the probing store refuses words beyond it.
    """
    capacity: int = DEFAULT_CAPACITY


@dataclass
class SpamConfig:
    """
    Configuration for the spam filter.

    Attributes:
        threshold: Score threshold for classifying as spam (0.0-1.0).
                   Messages with score >= threshold are marked as spam.
    """
    threshold: float = DEFAULT_THRESHOLD    # Scores >= this are spam


@dataclass
class UIConfig:
    """
    Configuration for the user interface.

    Attributes:
        theme: Color theme ("dark" or "light").
    """
    theme: str = "dark"


@dataclass
class Config:
    """
    Main configuration container for spamscope.

    Usage:
        >>> config = Config.load()
        >>> config.spam.threshold
        0.7
    """
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    spam: SpamConfig = field(default_factory=SpamConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    # -------------------------------------------------------------------------
    # File Paths
    # -------------------------------------------------------------------------

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    @staticmethod
    def default_dataset_path() -> Path:
        """Returns the default path of the dataset CSV."""
        return get_xdg_data_home() / "dataset.csv"

    @staticmethod
    def log_file_path() -> Path:
        """Returns the path to the debug log."""
        return get_xdg_state_home() / "spamscope.log"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Read config.toml, falling back to defaults when there is none.

        Args:
            path: Config file to read. Uses the XDG location if None.

        Raises:
            ConfigError: If the file can't be read, isn't TOML, or holds
                         out-of-range values.
        """
        config_path = Path(path) if path else cls.config_file_path()
        if not config_path.exists():
            return cls()

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"{config_path} is not valid TOML: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

        return cls._from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to the config file.

        Creates the config directory if it doesn't exist.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """
        Create a Config object from a dictionary (parsed TOML).

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        config = cls()

        dataset = data.get("dataset", {})
        config.dataset = DatasetConfig(path=str(dataset.get("path", "")))

        store = data.get("store", {})
        capacity = store.get("capacity", DEFAULT_CAPACITY)
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise ConfigError(f"store.capacity must be a positive integer, got {capacity!r}")
        config.store = StoreConfig(capacity=capacity)

        spam = data.get("spam", {})
        threshold = spam.get("threshold", DEFAULT_THRESHOLD)
        if isinstance(threshold, bool) or not isinstance(threshold, (int, float)) \
                or not 0.0 <= threshold <= 1.0:
            raise ConfigError(f"spam.threshold must be between 0.0 and 1.0, got {threshold!r}")
        config.spam = SpamConfig(threshold=float(threshold))

        ui = data.get("ui", {})
        config.ui = UIConfig(theme=ui.get("theme", "dark"))

        return config

    def _to_dict(self) -> dict[str, Any]:
        """
        Convert Config to a dictionary for TOML serialization.
        """
        return {
            "dataset": {
                "path": self.dataset.path,
            },
            "store": {
                "capacity": self.store.capacity,
            },
            "spam": {
                "threshold": self.spam.threshold,
            },
            "ui": {
                "theme": self.ui.theme,
            },
        }


# =============================================================================
# Utility Functions
# =============================================================================

def print_paths(config: Config | None = None) -> None:
    """Print where spamscope reads and writes its files (``--paths``)."""
    config = config or Config()
    for kind, getter in _DIRECTORY_GETTERS.items():
        print(f"{kind.capitalize() + ' dir:':<14}{getter()}")
    print()
    print(f"{'Config file:':<14}{Config.config_file_path()}")
    print(f"{'Dataset:':<14}{config.dataset.resolved_path()}")
    print(f"{'Debug log:':<14}{Config.log_file_path()}")
