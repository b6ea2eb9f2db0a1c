"""
Tests for the JSON file key-value storage.

These tests verify that:
- Values persist across storage instances
- Missing, corrupt or mis-shaped files read as empty
- Write failures raise StorageError
"""

import json
from unittest.mock import patch

import pytest

from recipes.storage import InMemoryStorage, JsonFileStorage, StorageError


class TestJsonFileStorage:
    """Tests for JsonFileStorage."""

    def test_missing_file_reads_empty(self, tmp_path):
        """Test a missing file behaves as empty storage."""
        storage = JsonFileStorage(tmp_path / "store.json")
        assert storage.get_item("favorites:v1") is None

    def test_values_persist_across_instances(self, tmp_path):
        """Test a written value is visible to a fresh instance."""
        path = tmp_path / "nested" / "store.json"
        JsonFileStorage(path).set_item("favorites:v1", "[]")

        assert JsonFileStorage(path).get_item("favorites:v1") == "[]"
        assert json.loads(path.read_text(encoding="utf-8")) == {"favorites:v1": "[]"}

    def test_remove_item(self, tmp_path):
        """Test removing a key persists the removal."""
        path = tmp_path / "store.json"
        storage = JsonFileStorage(path)
        storage.set_item("a", "1")
        storage.set_item("b", "2")
        storage.remove_item("a")

        assert JsonFileStorage(path).get_item("a") is None
        assert JsonFileStorage(path).get_item("b") == "2"

    def test_corrupt_file_reads_empty(self, tmp_path):
        """Test a file that is not JSON reads as empty."""
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        assert JsonFileStorage(path).get_item("favorites:v1") is None

    def test_non_object_file_reads_empty(self, tmp_path):
        """Test a JSON file that is not an object reads as empty."""
        path = tmp_path / "store.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        assert JsonFileStorage(path).get_item("0") is None

    def test_non_string_values_ignored(self, tmp_path):
        """Test only string values are exposed."""
        path = tmp_path / "store.json"
        path.write_text(json.dumps({"a": "x", "b": 3}), encoding="utf-8")
        storage = JsonFileStorage(path)
        assert storage.get_item("a") == "x"
        assert storage.get_item("b") is None

    def test_write_failure_raises_storage_error(self, tmp_path):
        """Test an OS error while writing is wrapped in StorageError."""
        storage = JsonFileStorage(tmp_path / "store.json")
        with patch("recipes.storage.tempfile.mkstemp", side_effect=OSError("disk full")):
            with pytest.raises(StorageError, match="disk full"):
                storage.set_item("a", "1")


class TestInMemoryStorage:
    """Tests for InMemoryStorage."""

    def test_get_set_remove(self):
        """Test the basic key-value contract."""
        storage = InMemoryStorage({"a": "1"})
        storage.set_item("b", "2")
        storage.remove_item("a")
        storage.remove_item("missing")
        assert storage.get_item("a") is None
        assert storage.get_item("b") == "2"
