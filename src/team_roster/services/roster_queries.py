"""Team-scoped views over an already loaded roster.

These never touch storage; callers read the roster once and derive every
view they need from it.
"""

from collections import Counter
from typing import Iterable

from team_roster.models.team import Player, Team
from team_roster.utils.team_normalizer import TEAM_ORDER


def filter_by_team(players: Iterable[Player], team: Team) -> list[Player]:
    """Players assigned to ``team``, in roster order."""
    return [p for p in players if p.team == team]


def split_by_team(players: Iterable[Player]) -> dict[Team, list[Player]]:
    """Partition a roster into both teams, keeping roster order in each."""
    by_team: dict[Team, list[Player]] = {team: [] for team in TEAM_ORDER}
    for player in players:
        by_team[player.team].append(player)
    return by_team


def count_by_team(players: Iterable[Player]) -> dict[Team, int]:
    """Number of players per team. Teams with no players count as 0."""
    counts = Counter(p.team for p in players)
    return {team: counts.get(team, 0) for team in TEAM_ORDER}


def find_player(players: Iterable[Player], name: str) -> Player | None:
    """First player whose name matches exactly (case-sensitive)."""
    return next((p for p in players if p.name == name), None)
