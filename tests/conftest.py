"""Shared fixtures for roster tests."""

import pytest

from team_roster.repositories import GroupRepository, PlayerRepository
from team_roster.services.roster_service import RosterService
from team_roster.storage.keys import KeyScheme
from team_roster.storage.locks import KeyLocks
from team_roster.storage.stores import MemoryStore


class FlakyStore(MemoryStore):
    """MemoryStore that raises OSError for the operations listed in ``fail_on``."""

    def __init__(self, initial: dict[str, str] | None = None):
        super().__init__(initial)
        self.fail_on: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    def _check(self, operation: str, key: str) -> None:
        self.calls.append((operation, key))
        if operation in self.fail_on:
            raise OSError(f"simulated {operation} failure")

    async def get(self, key: str) -> str | None:
        self._check("get", key)
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        self._check("set", key)
        await super().set(key, value)

    async def delete(self, key: str) -> None:
        self._check("delete", key)
        await super().delete(key)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def store():
    return FlakyStore()


@pytest.fixture
def keys():
    return KeyScheme()


@pytest.fixture
def locks():
    return KeyLocks()


@pytest.fixture
def group_repo(store, keys, locks):
    return GroupRepository(store, keys, locks)


@pytest.fixture
def player_repo(store, keys, locks):
    return PlayerRepository(store, keys, locks)


@pytest.fixture
def service(store):
    return RosterService(store)
