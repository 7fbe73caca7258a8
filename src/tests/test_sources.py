"""
Unit tests for legacy data sources.
"""

import json

import pytest


@pytest.mark.unit
class TestJsonDirectoryDataSource:
    """Tests for JsonDirectoryDataSource."""

    def test_loads_records_in_file_order(self, legacy_data_dir):
        from migrator.sources import JsonDirectoryDataSource

        source = JsonDirectoryDataSource(legacy_data_dir)
        users = source.load_collection("users")
        assert [u["id"] for u in users] == [1, 2, 3]

    def test_custom_file_names(self, tmp_path):
        from migrator.sources import JsonDirectoryDataSource

        (tmp_path / "legacy-users.json").write_text('[{"id": 1}]', encoding="utf-8")
        source = JsonDirectoryDataSource(tmp_path, {"users": "legacy-users.json"})
        assert source.load_collection("users") == [{"id": 1}]

    def test_missing_file(self, tmp_path):
        from migrator.exceptions import LegacyDataSourceError
        from migrator.sources import JsonDirectoryDataSource

        with pytest.raises(LegacyDataSourceError) as exc_info:
            JsonDirectoryDataSource(tmp_path).load_collection("reloads")
        assert exc_info.value.details["collection"] == "reloads"

    def test_invalid_json(self, tmp_path):
        from migrator.exceptions import LegacyDataSourceError
        from migrator.sources import JsonDirectoryDataSource

        (tmp_path / "users.json").write_text("[{", encoding="utf-8")
        with pytest.raises(LegacyDataSourceError):
            JsonDirectoryDataSource(tmp_path).load_collection("users")

    def test_object_instead_of_array(self, tmp_path):
        from migrator.exceptions import LegacyDataSourceError
        from migrator.sources import JsonDirectoryDataSource

        (tmp_path / "users.json").write_text(json.dumps({"id": 1}), encoding="utf-8")
        with pytest.raises(LegacyDataSourceError):
            JsonDirectoryDataSource(tmp_path).load_collection("users")


@pytest.mark.unit
class TestSnapshot:
    """Tests for load_snapshot and InMemoryDataSource."""

    def test_load_snapshot_parses_all_collections(self, legacy_source):
        from migrator.sources import load_snapshot

        snapshot = load_snapshot(legacy_source)
        assert [u.id for u in snapshot.users] == ["1", "2", "3"]
        assert snapshot.assignments[0].has_subscription is True
        assert snapshot.reloads[0].assignment_id == "10"
        assert snapshot.subscriptions[0].doc_id == "sub-30"

    def test_unknown_collection_is_empty(self):
        from migrator.sources import InMemoryDataSource

        assert InMemoryDataSource().load_collection("reloads") == []

    def test_records_are_copies(self):
        from migrator.sources import InMemoryDataSource

        source = InMemoryDataSource({"users": [{"id": 1}]})
        source.load_collection("users")[0]["id"] = 2
        assert source.load_collection("users") == [{"id": 1}]
