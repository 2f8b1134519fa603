"""LocalStorageClient 單元測試"""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)


class TestLocalStorageClient:
    """Key-Value 儲存測試"""

    @pytest.fixture
    def temp_dir(self):
        temp = tempfile.mkdtemp()
        yield temp
        shutil.rmtree(temp, ignore_errors=True)

    @pytest.fixture
    def client(self, temp_dir):
        return LocalStorageClient(base_dir=Path(temp_dir) / "storage")

    def test_missing_key_returns_default(self, client) -> None:
        assert client.get_item("absent") is None
        assert client.get_item("absent", []) == []
        assert client.has_item("absent") is False

    def test_set_creates_directory(self, client) -> None:
        client.set_item("k", {"a": 1})

        assert client.base_dir.exists()
        assert client.get_item("k") == {"a": 1}

    def test_set_overwrites_whole_value(self, client) -> None:
        client.set_item("k", [1, 2, 3])
        client.set_item("k", [4])

        assert client.get_item("k") == [4]

    def test_unicode_kept_readable(self, client) -> None:
        client.set_item("k", {"name": "網格 (副本)"})

        raw = (client.base_dir / "k.json").read_text(encoding="utf-8")
        assert "網格 (副本)" in raw

    def test_corrupt_json_logged_and_treated_as_absent(self, client, caplog) -> None:
        client.base_dir.mkdir(parents=True)
        (client.base_dir / "k.json").write_text("{not json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            assert client.get_item("k", "fallback") == "fallback"

        assert "Failed to read k" in caplog.text

    def test_remove_and_keys(self, client) -> None:
        client.set_item("b", 1)
        client.set_item("a", 2)

        assert client.keys() == ["a", "b"]

        client.remove_item("a")
        client.remove_item("never-existed")

        assert client.keys() == ["b"]

    def test_keys_without_directory(self, client) -> None:
        assert client.keys() == []
