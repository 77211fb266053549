"""Key-value substrate interface consumed by the roster core."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """Persistent mapping of string keys to string values.

    Implementations raise ``OSError`` (or a subclass) for any I/O fault.
    Each ``set`` replaces the whole value for its key atomically.
    """

    async def get(self, key: str) -> str | None:
        """Return the value stored under ``key`` or None if never written."""
        ...

    async def set(self, key: str, value: str) -> None:
        ...

    async def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is not an error."""
        ...
