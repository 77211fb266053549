"""Repository base class shared by the group and player repositories."""

import logging

from team_roster.errors import StorageError
from team_roster.models.team import Player
from team_roster.storage import codec
from team_roster.storage.base import KeyValueStore
from team_roster.storage.keys import KeyScheme
from team_roster.storage.locks import KeyLocks
from team_roster.utils.team_normalizer import normalize_name


class StoreRepository:
    """Reads and writes domain collections through a key-value store.

    All substrate access goes through :meth:`_get`, :meth:`_set` and
    :meth:`_delete`, which turn ``OSError`` from the store into
    ``StorageError``. Decoding failures surface as ``CorruptDataError``.

    Repositories built on the same store should share one ``KeyScheme`` and
    one ``KeyLocks`` so their read-modify-write cycles are serialized.
    """

    def __init__(
        self,
        store: KeyValueStore,
        keys: KeyScheme | None = None,
        locks: KeyLocks | None = None,
    ):
        self._store = store
        self._keys = keys or KeyScheme()
        self._locks = locks or KeyLocks()
        self._log = logging.getLogger(f"team_roster.repository.{type(self).__name__}")

    async def _get(self, key: str) -> str | None:
        try:
            return await self._store.get(key)
        except OSError as e:
            self._log.error(f"Read failed for {key!r}: {e}")
            raise StorageError("read", key) from e

    async def _set(self, key: str, value: str) -> None:
        try:
            await self._store.set(key, value)
        except OSError as e:
            self._log.error(f"Write failed for {key!r}: {e}")
            raise StorageError("write", key) from e

    async def _delete(self, key: str) -> None:
        try:
            await self._store.delete(key)
        except OSError as e:
            self._log.error(f"Delete failed for {key!r}: {e}")
            raise StorageError("delete", key) from e

    async def group_exists(self, name: str) -> bool:
        """Whether the group index lists ``name`` (compared after trimming)."""
        return normalize_name(name, "group name") in await self._load_index()

    async def _load_index(self) -> list[str]:
        key = self._keys.index_key()
        return codec.decode_index(await self._get(key), key)

    async def _save_index(self, groups: list[str]) -> None:
        await self._set(self._keys.index_key(), codec.encode_index(groups))

    async def _load_roster(self, group_name: str) -> list[Player]:
        key = self._keys.roster_key(group_name)
        return codec.decode_roster(await self._get(key), key)

    async def _save_roster(self, group_name: str, players: list[Player]) -> None:
        await self._set(self._keys.roster_key(group_name), codec.encode_roster(players))
