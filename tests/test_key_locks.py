"""Tests for per-key serialization of read-modify-write cycles."""

import asyncio

import pytest

from team_roster.models.team import Player, Team
from team_roster.repositories import GroupRepository, PlayerRepository
from team_roster.storage.keys import KeyScheme
from team_roster.storage.locks import KeyLocks
from team_roster.storage.stores import MemoryStore

pytestmark = pytest.mark.anyio


class SlowStore(MemoryStore):
    """MemoryStore whose reads yield to the event loop before returning."""

    async def get(self, key: str) -> str | None:
        value = self.data.get(key)
        await asyncio.sleep(0)
        return value


async def _race_adds(serialize: bool) -> list[Player]:
    store = SlowStore()
    keys = KeyScheme()
    locks = KeyLocks(enabled=serialize)
    groups = GroupRepository(store, keys, locks)
    players = PlayerRepository(store, keys, locks)

    await groups.create_group("Turma A")
    await asyncio.gather(*(
        players.add_player(Player(f"P{i}", Team.A if i % 2 else Team.B), "Turma A")
        for i in range(10)
    ))
    return await players.get_all_players("Turma A")


async def test_concurrent_adds_are_serialized():
    """With locking enabled no add is lost."""
    roster = await _race_adds(serialize=True)
    assert sorted(p.name for p in roster) == sorted(f"P{i}" for i in range(10))


async def test_unserialized_adds_can_lose_updates():
    """Without locking, overlapping read-modify-write cycles drop players."""
    roster = await _race_adds(serialize=False)
    assert len(roster) < 10


async def test_hold_marks_keys_locked():
    locks = KeyLocks()
    async with locks.hold("index", "roster"):
        assert locks.is_locked("index")
        assert locks.is_locked("roster")
    assert not locks.is_locked("index")
    assert not locks.is_locked("roster")


async def test_disabled_locks_hold_nothing():
    locks = KeyLocks(enabled=False)
    async with locks.hold("index"):
        assert not locks.is_locked("index")


async def test_repeated_key_does_not_deadlock():
    locks = KeyLocks()
    async with locks.hold("k", "k"):
        assert locks.is_locked("k")


async def test_registry_empty_after_hold():
    locks = KeyLocks()
    async with locks.hold("index", "roster"):
        assert len(locks) == 2
    assert len(locks) == 0


async def test_registry_empty_after_error_in_block():
    locks = KeyLocks()
    with pytest.raises(RuntimeError):
        async with locks.hold("index"):
            raise RuntimeError("boom")
    assert len(locks) == 0


async def test_waiters_share_lock_until_last_leaves():
    locks = KeyLocks()
    order: list[str] = []

    async def worker(name: str):
        async with locks.hold("roster"):
            order.append(name)
            await asyncio.sleep(0)
            assert len(locks) == 1

    await asyncio.gather(*(worker(f"w{i}") for i in range(5)))

    assert order == [f"w{i}" for i in range(5)]
    assert len(locks) == 0


async def test_removals_for_unknown_groups_leave_no_locks():
    """Keys derived from arbitrary group names are not retained."""
    store = MemoryStore()
    locks = KeyLocks()
    players = PlayerRepository(store, KeyScheme(), locks)

    for i in range(50):
        assert await players.remove_player("x", f"nope{i}") is False

    assert len(locks) == 0
