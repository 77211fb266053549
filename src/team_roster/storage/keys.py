"""Storage key layout.

    {prefix}:groups                 -> group index
    {prefix}:players:{escaped name} -> roster of one group

Group names are percent-encoded with no safe characters, so ``:`` and ``%``
inside a name are always escaped and distinct names never share a key.
"""

from urllib.parse import quote

DEFAULT_PREFIX = "@team-roster"


class KeyScheme:
    """Maps domain identifiers to storage keys under a fixed prefix."""

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        if not prefix:
            raise ValueError("Key prefix must not be empty")
        self.prefix = prefix
        self._roster_prefix = f"{prefix}:players:"

    def index_key(self) -> str:
        return f"{self.prefix}:groups"

    def roster_key(self, group_name: str) -> str:
        return self._roster_prefix + quote(group_name, safe="")
