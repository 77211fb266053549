"""Utility modules for team_roster."""

from team_roster.utils.team_normalizer import (
    TEAM_ALIASES,
    TEAM_ORDER,
    normalize_team,
    normalize_team_strict,
    is_valid_team,
    normalize_name,
    normalize_group_name,
)

__all__ = [
    "TEAM_ALIASES",
    "TEAM_ORDER",
    "normalize_team",
    "normalize_team_strict",
    "is_valid_team",
    "normalize_name",
    "normalize_group_name",
]
