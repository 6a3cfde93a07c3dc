# =============================================================================
# Dataset Module
# =============================================================================
# The persistent word table and everything that reads it in bulk:
#   - Dataset: ordered word list + mirrored stores
#   - DatasetCodec: transposed CSV load/save
#   - query: filter/sort engine for inspection
#   - dataset_stats: summary figures
# =============================================================================

from spamscope.dataset.model import Dataset
from spamscope.dataset.codec import ColumnError, DatasetCodec, LoadReport
from spamscope.dataset.query import (
    Direction,
    NumericPredicate,
    QueryRow,
    SortKey,
    WordFilter,
    query,
)
from spamscope.dataset.stats import DatasetStats, dataset_stats

__all__ = [
    "Dataset",
    "ColumnError",
    "DatasetCodec",
    "LoadReport",
    "Direction",
    "NumericPredicate",
    "QueryRow",
    "SortKey",
    "WordFilter",
    "query",
    "DatasetStats",
    "dataset_stats",
]
