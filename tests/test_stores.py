"""Tests for the concrete key-value stores."""

import pytest

from team_roster.config import Settings
from team_roster.storage.base import KeyValueStore
from team_roster.storage.stores import DuckDBStore, MemoryStore, create_store

pytestmark = pytest.mark.anyio


class TestMemoryStore:
    """Tests for MemoryStore."""

    async def test_get_missing_returns_none(self):
        assert await MemoryStore().get("nope") is None

    async def test_set_get_delete(self):
        store = MemoryStore()
        await store.set("k", "v1")
        await store.set("k", "v2")
        assert await store.get("k") == "v2"

        await store.delete("k")
        assert await store.get("k") is None

    async def test_delete_missing_is_noop(self):
        store = MemoryStore({"a": "1"})
        await store.delete("b")
        assert store.data == {"a": "1"}

    def test_satisfies_protocol(self):
        assert isinstance(MemoryStore(), KeyValueStore)


class TestDuckDBStore:
    """Tests for the DuckDB-backed store."""

    async def test_set_get_overwrite(self, tmp_path):
        store = DuckDBStore(tmp_path / "roster.duckdb")
        assert await store.get("k") is None

        await store.set("k", "first")
        await store.set("k", "second")
        assert await store.get("k") == "second"

    async def test_delete(self, tmp_path):
        store = DuckDBStore(tmp_path / "roster.duckdb")
        await store.set("k", "v")
        await store.delete("k")
        await store.delete("missing")
        assert await store.get("k") is None

    async def test_values_persist_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "roster.duckdb"
        await DuckDBStore(path).set("@team-roster:groups", '["Turma A"]')

        assert await DuckDBStore(str(path)).get("@team-roster:groups") == '["Turma A"]'

    def test_unreadable_database_raises_oserror(self, tmp_path):
        path = tmp_path / "broken.duckdb"
        path.write_text("this is not a duckdb file")

        with pytest.raises(OSError):
            DuckDBStore(path)


class TestCreateStore:
    """Tests for the store factory."""

    def test_memory_backend(self):
        store = create_store(Settings(storage_backend="memory"))
        assert isinstance(store, MemoryStore)

    def test_duckdb_backend(self, tmp_path):
        path = tmp_path / "roster.duckdb"
        store = create_store(Settings(storage_backend="duckdb", database_path=str(path)))

        assert isinstance(store, DuckDBStore)
        assert path.exists()
