"""Repository package - expose all concrete repositories from one import."""

from team_roster.repositories.group_repository import GroupRepository
from team_roster.repositories.player_repository import PlayerRepository

__all__ = [
    "GroupRepository",
    "PlayerRepository",
]
