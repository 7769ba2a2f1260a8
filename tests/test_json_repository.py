"""Tests for the JSON and in-memory repositories."""

import json

import pytest

from brickset.domain.entities import LegoSet
from brickset.exceptions import DataLoadError
from brickset.infrastructure.repositories import (
    DEFAULT_DATA_FILE,
    InMemoryRecordRepository,
    JsonRecordLoader,
    JsonRecordRepository,
    LegoSetRepository,
)


class TestJsonRecordLoader:
    """Test the generic JSON loader."""

    def test_load_with_custom_factory(self, tmp_path):
        path = tmp_path / "points.json"
        path.write_text(json.dumps([{"x": 1}, {"x": 2}]))

        loader = JsonRecordLoader(lambda entry: entry["x"])
        assert loader.load(path) == (1, 2)

    def test_missing_file(self, tmp_path):
        loader = JsonRecordLoader(dict)
        with pytest.raises(DataLoadError, match="does not exist"):
            loader.load(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{")
        with pytest.raises(DataLoadError, match="not valid JSON"):
            JsonRecordLoader(dict).load(path)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"number": "1"}))
        with pytest.raises(DataLoadError, match="Expected a JSON array"):
            JsonRecordLoader(dict).load(path)

    def test_validation_errors_reported(self, tmp_path):
        path = tmp_path / "sets.json"
        path.write_text(json.dumps([{"x": 1}]))

        loader = JsonRecordLoader(dict, validate=lambda data: ["bad one", "bad two"])
        with pytest.raises(DataLoadError, match="bad one; bad two"):
            loader.load(path)

    def test_factory_error_names_entry(self, tmp_path):
        path = tmp_path / "sets.json"
        path.write_text(json.dumps([{"number": "1", "name": "a", "pieces": 1}, "oops"]))

        loader = JsonRecordLoader(LegoSet.from_dict)
        with pytest.raises(DataLoadError, match="entry 1"):
            loader.load(path)

    def test_empty_array(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text("[]")
        assert JsonRecordLoader(dict).load(path) == ()


class TestLegoSetRepository:
    """Test the LegoSet repository."""

    def test_loads_in_file_order(self, data_file):
        repository = LegoSetRepository(data_file)
        sets = repository.get_all()

        assert [s.number for s in sets] == ["001", "002", "003"]
        assert sets[2].theme is None
        assert repository.count() == 3

    def test_snapshot_is_immutable_tuple(self, data_file):
        repository = LegoSetRepository(data_file)
        assert isinstance(repository.get_all(), tuple)
        assert repository.get_all() is repository.get_all()

    def test_loaded_once_at_construction(self, data_file):
        repository = LegoSetRepository(data_file)
        data_file.write_text("[]")
        assert repository.count() == 3

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "sets.json"
        path.write_text(json.dumps([{"number": "1", "name": "a", "pieces": "many"}]))

        with pytest.raises(DataLoadError, match="pieces"):
            LegoSetRepository(path)

    def test_piece_count_above_limit(self, tmp_path):
        path = tmp_path / "sets.json"
        path.write_text(json.dumps([{"number": "1", "name": "Huge", "theme": "T", "pieces": 2**31}]))

        with pytest.raises(DataLoadError, match="pieces"):
            LegoSetRepository(path)

    def test_entry_above_limit_without_schema(self, tmp_path):
        path = tmp_path / "sets.json"
        path.write_text(json.dumps([{"number": "1", "name": "Huge", "theme": "T", "pieces": 2**31}]))

        with pytest.raises(DataLoadError, match="'1'"):
            JsonRecordLoader(LegoSet.from_dict).load(path)

    def test_bundled_data_file(self):
        repository = LegoSetRepository()
        assert repository.source == DEFAULT_DATA_FILE
        assert repository.count() > 0
        assert all(s.theme is not None for s in repository.get_all())


class TestJsonRecordRepository:
    """Test composing a repository from a loader."""

    def test_generic_records(self, tmp_path):
        path = tmp_path / "names.json"
        path.write_text(json.dumps([{"name": "a"}, {"name": "b"}]))

        repository = JsonRecordRepository(path, JsonRecordLoader(lambda e: e["name"]))
        assert repository.get_all() == ("a", "b")


class TestInMemoryRecordRepository:
    """Test the in-memory repository."""

    def test_get_all(self):
        repository = InMemoryRecordRepository([1, 2, 3])
        assert repository.get_all() == (1, 2, 3)
        assert repository.count() == 3

    def test_empty(self):
        assert InMemoryRecordRepository().get_all() == ()
