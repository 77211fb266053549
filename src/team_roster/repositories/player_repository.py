"""Roster persistence for players within a group."""

from team_roster.errors import DuplicatePlayerError, GroupNotFoundError, PlayerNotFoundError
from team_roster.models.team import Player, Team
from team_roster.repositories.base import StoreRepository
from team_roster.services.roster_queries import filter_by_team, find_player
from team_roster.utils.team_normalizer import normalize_name, normalize_team_strict


class PlayerRepository(StoreRepository):
    """Adds, removes and lists the players of a group.

    Reads never consult the group index: a group without a stored roster
    simply has no players.
    """

    async def add_player(self, player: Player, group_name: str) -> Player:
        """Append a player to a group's roster.

        Args:
            player: Player to add; name is trimmed and team validated
            group_name: Existing group to add the player to

        Returns:
            The stored player

        Raises:
            InvalidInputError: If the name is blank or the team is unknown
            GroupNotFoundError: If the group does not exist
            DuplicatePlayerError: If the group already has a player with this name
        """
        group_name = normalize_name(group_name, "group name")
        new_player = Player(
            name=normalize_name(player.name, "player name"),
            team=normalize_team_strict(player.team),
        )
        index_key = self._keys.index_key()
        roster_key = self._keys.roster_key(group_name)

        async with self._locks.hold(index_key, roster_key):
            if not await self.group_exists(group_name):
                raise GroupNotFoundError(group_name)

            players = await self._load_roster(group_name)
            if find_player(players, new_player.name) is not None:
                raise DuplicatePlayerError(new_player.name, group_name)

            players.append(new_player)
            await self._save_roster(group_name, players)

        self._log.info(
            f"Added {new_player.name!r} to {new_player.team.value!r} in {group_name!r}"
        )
        return new_player

    async def remove_player(
        self,
        player_name: str,
        group_name: str,
        *,
        missing_ok: bool = True,
    ) -> bool:
        """Remove a player from a group's roster.

        Args:
            player_name: Name of the player to remove
            group_name: Group the player belongs to
            missing_ok: When True (default) removing an absent player is a
                no-op; when False it raises PlayerNotFoundError

        Returns:
            True if a player was removed
        """
        group_name = normalize_name(group_name, "group name")
        player_name = normalize_name(player_name, "player name")
        roster_key = self._keys.roster_key(group_name)

        async with self._locks.hold(roster_key):
            players = await self._load_roster(group_name)
            remaining = [p for p in players if p.name != player_name]

            if len(remaining) == len(players):
                if not missing_ok:
                    raise PlayerNotFoundError(player_name, group_name)
                self._log.debug(f"{player_name!r} not in {group_name!r}; nothing to remove")
                return False

            await self._save_roster(group_name, remaining)

        self._log.info(f"Removed {player_name!r} from {group_name!r}")
        return True

    async def get_players_by_team(self, group_name: str, team: Team | str) -> list[Player]:
        """Players of one team in insertion order; empty if the group has none."""
        team = normalize_team_strict(team)
        return filter_by_team(await self.get_all_players(group_name), team)

    async def get_all_players(self, group_name: str) -> list[Player]:
        """Every player of the group in insertion order."""
        return await self._load_roster(normalize_name(group_name, "group name"))
