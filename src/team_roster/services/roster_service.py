"""Roster operations exposed to screens and the HTTP API.

Each operation returns a ``RosterResult`` instead of raising: known failures
(``RosterError`` subclasses) come back as ``ok=False`` with an ``ErrorKind``
and a displayable message. Any other exception propagates unchanged so the
caller can treat it as a generic failure.
"""

import logging
from typing import Any, Awaitable, Callable, TypeVar

from team_roster.config import Settings
from team_roster.errors import RosterError
from team_roster.models.results import RosterResult
from team_roster.models.team import Player, Team
from team_roster.repositories.group_repository import GroupRepository
from team_roster.repositories.player_repository import PlayerRepository
from team_roster.services.roster_queries import count_by_team
from team_roster.storage.base import KeyValueStore
from team_roster.storage.keys import DEFAULT_PREFIX, KeyScheme
from team_roster.storage.locks import KeyLocks
from team_roster.storage.stores import create_store
from team_roster.utils.team_normalizer import normalize_team_strict

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RosterService:
    """Facade over the group and player repositories sharing one store."""

    def __init__(
        self,
        store: KeyValueStore,
        key_prefix: str = DEFAULT_PREFIX,
        serialize_writes: bool = True,
    ):
        keys = KeyScheme(key_prefix)
        locks = KeyLocks(enabled=serialize_writes)
        self.groups = GroupRepository(store, keys, locks)
        self.players = PlayerRepository(store, keys, locks)

    @classmethod
    def from_settings(cls, settings: Settings) -> "RosterService":
        return cls(
            create_store(settings),
            key_prefix=settings.key_prefix,
            serialize_writes=settings.serialize_writes,
        )

    async def _attempt(
        self,
        operation: str,
        func: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> RosterResult[T]:
        try:
            value = await func(*args, **kwargs)
        except RosterError as e:
            logger.info(f"{operation} failed ({e.kind.value}): {e.message}")
            return RosterResult.failure(e)
        return RosterResult.success(value)

    async def create_group(self, name: str) -> RosterResult[str]:
        return await self._attempt("create_group", self.groups.create_group, name)

    async def remove_group(self, name: str) -> RosterResult[None]:
        return await self._attempt("remove_group", self.groups.remove_group, name)

    async def list_groups(self) -> RosterResult[list[str]]:
        return await self._attempt("list_groups", self.groups.list_groups)

    async def add_player(self, name: str, team: Team | str, group: str) -> RosterResult[Player]:
        async def add() -> Player:
            player = Player(name=name, team=normalize_team_strict(team))
            return await self.players.add_player(player, group)

        return await self._attempt("add_player", add)

    async def remove_player(
        self, name: str, group: str, *, missing_ok: bool = True
    ) -> RosterResult[bool]:
        return await self._attempt(
            "remove_player", self.players.remove_player, name, group, missing_ok=missing_ok
        )

    async def list_players_by_team(
        self, group: str, team: Team | str
    ) -> RosterResult[list[Player]]:
        return await self._attempt(
            "list_players_by_team", self.players.get_players_by_team, group, team
        )

    async def list_all_players(self, group: str) -> RosterResult[list[Player]]:
        return await self._attempt("list_all_players", self.players.get_all_players, group)

    async def team_counts(self, group: str) -> RosterResult[dict[Team, int]]:
        """Players per team from a single roster read."""
        async def count() -> dict[Team, int]:
            return count_by_team(await self.players.get_all_players(group))

        return await self._attempt("team_counts", count)
