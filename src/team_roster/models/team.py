"""Team and player models."""

from dataclasses import dataclass
from enum import Enum


class Team(str, Enum):
    """The two sub-teams a player can be assigned to within a group."""

    A = "Time A"
    B = "Time B"


@dataclass(frozen=True)
class Player:
    """A player on a group's roster."""

    name: str
    team: Team

    def to_dict(self) -> dict:
        """Serialize to dictionary for JSON response."""
        return {"name": self.name, "team": self.team.value}
