"""Group index persistence."""

from team_roster.errors import DuplicateGroupError, GroupNotFoundError
from team_roster.repositories.base import StoreRepository
from team_roster.utils.team_normalizer import normalize_group_name, normalize_name


class GroupRepository(StoreRepository):
    """Creates, lists and removes groups.

    The group index is the source of truth for which groups exist. Creation
    writes the index last and removal writes it first, so an interrupted
    operation never leaves an indexed group pointing at someone else's
    roster. A roster left behind by an interrupted removal is cleared when
    the name is created again.
    """

    async def list_groups(self) -> list[str]:
        """All group names in creation order."""
        return await self._load_index()

    async def create_group(self, name: str) -> str:
        """Register a new group.

        Args:
            name: Group name; surrounding whitespace is ignored

        Returns:
            The stored (trimmed) group name

        Raises:
            InvalidInputError: If the name is blank or contains "/"
            DuplicateGroupError: If a group with this name already exists
        """
        group_name = normalize_group_name(name)
        index_key = self._keys.index_key()
        roster_key = self._keys.roster_key(group_name)

        async with self._locks.hold(index_key, roster_key):
            groups = await self._load_index()
            if group_name in groups:
                raise DuplicateGroupError(group_name)

            # Clear any roster orphaned by an interrupted removal
            await self._delete(roster_key)

            groups.append(group_name)
            await self._save_index(groups)

        self._log.info(f"Created group {group_name!r} ({len(groups)} groups)")
        return group_name

    async def remove_group(self, name: str) -> None:
        """Remove a group and its whole roster.

        Raises:
            InvalidInputError: If the name is blank
            GroupNotFoundError: If no group has this name
        """
        group_name = normalize_name(name, "group name")
        index_key = self._keys.index_key()
        roster_key = self._keys.roster_key(group_name)

        async with self._locks.hold(index_key, roster_key):
            groups = await self._load_index()
            if group_name not in groups:
                raise GroupNotFoundError(group_name)

            await self._save_index([g for g in groups if g != group_name])
            await self._delete(roster_key)

        self._log.info(f"Removed group {group_name!r} and its roster")
