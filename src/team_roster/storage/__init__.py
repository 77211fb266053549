"""Storage substrate adapters, codec and key layout."""

from team_roster.storage.base import KeyValueStore
from team_roster.storage.keys import KeyScheme
from team_roster.storage.locks import KeyLocks
from team_roster.storage.stores import DuckDBStore, MemoryStore, create_store

__all__ = [
    "KeyValueStore",
    "KeyScheme",
    "KeyLocks",
    "DuckDBStore",
    "MemoryStore",
    "create_store",
]
