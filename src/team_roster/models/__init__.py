"""Data models for the team roster core."""

from team_roster.models.team import Player, Team
from team_roster.models.results import RosterResult

__all__ = [
    "Player",
    "Team",
    "RosterResult",
]
