# =============================================================================
# Dataset Codec Tests
# =============================================================================
# Transposed CSV load/save and every way a file can be wrong.
# =============================================================================

import pytest

from spamscope.core import WordFrequency
from spamscope.dataset import Dataset, DatasetCodec
from spamscope.dataset.codec import format_count, parse_count, split_fields
from spamscope.errors import DatasetFileError, DatasetFormatError


def _rows(dataset):
    return [(e.word, e.spam_count, e.ham_count) for e in dataset.entries()]


def _write(temp_dir, text, name="dataset.csv"):
    path = temp_dir / name
    path.write_text(text, encoding="utf-8")
    return path


class TestSplitFields:
    def test_strips_quotes(self):
        assert split_fields('"a",b,"c"') == ["a", "b", "c"]

    def test_empty_line_has_no_fields(self):
        assert split_fields("") == []
        assert split_fields("\r\n") == []

    def test_trailing_comma(self):
        assert split_fields("1,2,") == ["1", "2"]

    def test_lone_quote_is_kept(self):
        assert split_fields('"') == ['"']


class TestCounts:
    @pytest.mark.parametrize("text, value", [("9", 9.0), ("0", 0.0), ("2.5", 2.5), (" 3 ", 3.0)])
    def test_parse_count(self, text, value):
        assert parse_count(text) == value

    @pytest.mark.parametrize("text", ["abc", "", "-1", "nan", "inf", "1_000"])
    def test_parse_count_rejects(self, text):
        with pytest.raises(ValueError):
            parse_count(text)

    def test_format_count(self):
        assert format_count(9.0) == "9"
        assert format_count(2.5) == "2.5"
        value = 0.1 + 0.2
        assert parse_count(format_count(value)) == value


class TestLoad:
    def test_load_example(self, dataset_file):
        dataset = Dataset(capacity=101)
        report = DatasetCodec().load(dataset_file, dataset)

        assert report.ok
        assert report.loaded == 2
        assert dataset.words == ["free", "meeting"]
        assert _rows(dataset) == [("free", 9, 1), ("meeting", 1, 9)]

    def test_load_fills_every_store(self, dataset_file):
        dataset = Dataset(capacity=101)
        DatasetCodec().load(dataset_file, dataset)
        for store in dataset.stores:
            assert store.lookup("free").spam_count == 9
            assert store.lookup("meeting").ham_count == 9

    def test_load_replaces_previous_content(self, dataset_file):
        dataset = Dataset(capacity=101)
        dataset.add(WordFrequency("stale", 1, 1))
        DatasetCodec().load(dataset_file, dataset)

        assert "stale" not in dataset
        assert dataset.words == ["free", "meeting"]

    def test_missing_file(self, temp_dir, sample_dataset):
        with pytest.raises(DatasetFileError):
            DatasetCodec().load(temp_dir / "missing.csv", sample_dataset)
        assert _rows(sample_dataset) == [("free", 9, 1), ("meeting", 1, 9)]

    def test_mismatched_lines_leave_dataset_untouched(self, temp_dir, sample_dataset):
        path = _write(temp_dir, '"a","b"\n1\n1,2\n')
        with pytest.raises(DatasetFormatError):
            DatasetCodec().load(path, sample_dataset)
        assert _rows(sample_dataset) == [("free", 9, 1), ("meeting", 1, 9)]

    def test_missing_count_lines(self, temp_dir):
        path = _write(temp_dir, '"a","b"\n')
        with pytest.raises(DatasetFormatError):
            DatasetCodec().load(path, Dataset(capacity=11))

    def test_bad_columns_are_skipped(self, temp_dir):
        path = _write(temp_dir, '"a","b","c"\n1,x,3\n1,2,-1\n')
        dataset = Dataset(capacity=11)
        report = DatasetCodec().load(path, dataset)

        assert dataset.words == ["a"]
        assert [(e.column, e.word) for e in report.column_errors] == [(2, "b"), (3, "c")]
        assert str(report.column_errors[0]).startswith("Error processing column 2: b")
        assert not report.ok

    def test_header_sentinel_and_blank_words_skipped(self, temp_dir):
        path = _write(temp_dir, '"Word","free","",word\n0,9,1,0\n0,1,1,0\n')
        dataset = Dataset(capacity=11)
        report = DatasetCodec().load(path, dataset)

        assert dataset.words == ["free"]
        assert report.skipped == 3

    def test_duplicate_word_keeps_first_position_and_last_counts(self, temp_dir):
        path = _write(temp_dir, '"free","x","free"\n1,2,3\n1,2,4\n')
        dataset = Dataset(capacity=11)
        DatasetCodec().load(path, dataset)

        assert dataset.words == ["free", "x"]
        assert _rows(dataset) == [("free", 3, 4), ("x", 2, 2)]

    def test_trailing_commas_and_crlf(self, temp_dir):
        path = _write(temp_dir, '"a","b",\r\n1,2,\r\n3,4,\r\n')
        dataset = Dataset(capacity=11)
        DatasetCodec().load(path, dataset)
        assert _rows(dataset) == [("a", 1, 3), ("b", 2, 4)]

    def test_empty_file(self, temp_dir):
        path = _write(temp_dir, "")
        dataset = Dataset(capacity=11)
        report = DatasetCodec().load(path, dataset)
        assert report.loaded == 0
        assert len(dataset) == 0

    def test_capacity_errors_are_reported(self, temp_dir, caplog):
        path = _write(temp_dir, '"a","b","c"\n1,1,1\n0,0,0\n')
        dataset = Dataset(capacity=2)
        report = DatasetCodec().load(path, dataset)

        assert len(report.capacity_errors) == 1
        # The chaining primary still holds every word
        assert dataset.words == ["a", "b", "c"]
        # Logged once, by the loader
        assert sum("Hash table is full" in r.getMessage() for r in caplog.records) == 1

    def test_digit_separator_column_is_skipped(self, temp_dir):
        path = _write(temp_dir, '"a","b"\n1_000,2\n0,0\n')
        dataset = Dataset(capacity=11)
        report = DatasetCodec().load(path, dataset)

        assert dataset.words == ["b"]
        assert [e.column for e in report.column_errors] == [1]


class TestSave:
    def test_save_format(self, temp_dir, sample_dataset, sample_csv):
        path = temp_dir / "out.csv"
        DatasetCodec().save(path, sample_dataset.words, sample_dataset.primary)
        assert path.read_text(encoding="utf-8") == sample_csv

    def test_missing_entry_saved_as_zero(self, sample_dataset):
        text = DatasetCodec().dumps(["free", "ghost"], sample_dataset.primary)
        assert text == '"free","ghost"\n9,0\n1,0\n'

    def test_save_then_load_round_trip(self, temp_dir):
        source = Dataset(capacity=11)
        for entry in (
            WordFrequency("zeta", 0.5, 3),
            WordFrequency("alpha", 12, 0),
            WordFrequency("mid", 0.1 + 0.2, 7.25),
        ):
            source.add(entry)

        path = temp_dir / "round.csv"
        codec = DatasetCodec()
        codec.save(path, source.words, source.primary)

        loaded = Dataset(capacity=11)
        codec.load(path, loaded)
        assert _rows(loaded) == _rows(source)

    def test_save_creates_parent_directories(self, temp_dir, sample_dataset):
        path = temp_dir / "nested" / "dir" / "dataset.csv"
        DatasetCodec().save(path, sample_dataset.words, sample_dataset.primary)
        assert path.exists()

    def test_save_leaves_no_temporary_file(self, temp_dir, sample_dataset):
        path = temp_dir / "dataset.csv"
        DatasetCodec().save(path, sample_dataset.words, sample_dataset.primary)
        assert [p.name for p in temp_dir.iterdir()] == ["dataset.csv"]

    def test_unwritable_target(self, temp_dir, sample_dataset):
        target = temp_dir / "is_a_directory"
        target.mkdir()
        with pytest.raises(DatasetFileError):
            DatasetCodec().save(target, sample_dataset.words, sample_dataset.primary)
        assert not (temp_dir / "is_a_directory.tmp").exists()

    def test_non_utf8_bytes_round_trip(self, temp_dir):
        raw = b'"caf\xe9","free"\n3,9\n1,1\n'
        path = temp_dir / "latin1.csv"
        path.write_bytes(raw)

        codec = DatasetCodec()
        dataset = Dataset(capacity=11)
        report = codec.load(path, dataset)
        assert report.loaded == 2
        assert dataset.lookup("free").spam_count == 9

        out = temp_dir / "out.csv"
        codec.save(out, dataset.words, dataset.primary)
        assert out.read_bytes() == raw
