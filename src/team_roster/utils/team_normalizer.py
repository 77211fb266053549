"""Centralized team label and name normalization.

All input coming from callers (screens, HTTP bodies, query strings) goes
through this module before it reaches a repository. The canonical team
format is the ``Team`` enum; canonical names are stripped of surrounding
whitespace.
"""

from typing import Optional

from team_roster.errors import InvalidInputError
from team_roster.models.team import Team

# Mapping from any known team label format to the canonical team
TEAM_ALIASES: dict[str, Team] = {
    # Team A variations
    "time a": Team.A,
    "team a": Team.A,
    "a": Team.A,

    # Team B variations
    "time b": Team.B,
    "team b": Team.B,
    "b": Team.B,
}

# Team ordering for consistent display
TEAM_ORDER = [Team.A, Team.B]


def normalize_team(label: Optional[str | Team]) -> Optional[Team]:
    """Normalize a team label to the canonical ``Team``.

    Args:
        label: Team label in any known format (e.g., "Time A", "team b", "A")

    Returns:
        The matching ``Team`` or None if invalid/None

    Examples:
        >>> normalize_team("Time A")
        <Team.A: 'Time A'>
        >>> normalize_team("b")
        <Team.B: 'Time B'>
        >>> normalize_team("Time C") is None
        True
    """
    if label is None:
        return None
    if isinstance(label, Team):
        return label

    return TEAM_ALIASES.get(" ".join(label.split()).lower())


def normalize_team_strict(label: Optional[str | Team]) -> Team:
    """Normalize a team label, raising InvalidInputError if unknown."""
    team = normalize_team(label)
    if team is None:
        valid = ", ".join(t.value for t in TEAM_ORDER)
        raise InvalidInputError(f"Unknown team '{label}'. Expected one of: {valid}.")
    return team


def is_valid_team(label: Optional[str | Team]) -> bool:
    """Check if a team label can be normalized."""
    return normalize_team(label) is not None


def normalize_name(value: Optional[str], what: str = "name") -> str:
    """Strip surrounding whitespace from a group or player name.

    Args:
        value: Raw name as typed by the user
        what: Label used in the error message ("group name", "player name")

    Returns:
        The trimmed name

    Raises:
        InvalidInputError: If the name is missing or blank after trimming
    """
    name = (value or "").strip()
    if not name:
        raise InvalidInputError(f"Please provide a {what}.")
    return name


def normalize_group_name(value: Optional[str]) -> str:
    """Trim a new group name and reject characters that cannot appear in a URL path segment.

    Raises:
        InvalidInputError: If the name is blank or contains "/"
    """
    name = normalize_name(value, "group name")
    if "/" in name:
        raise InvalidInputError("Group names cannot contain '/'.")
    return name
