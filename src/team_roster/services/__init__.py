"""Business logic services."""

from team_roster.services.roster_queries import (
    count_by_team,
    filter_by_team,
    find_player,
    split_by_team,
)

__all__ = [
    "count_by_team",
    "filter_by_team",
    "find_player",
    "split_by_team",
]
