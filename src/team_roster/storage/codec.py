"""Serialization of the group index and rosters to stored strings.

Every value is written as a versioned, tagged JSON document::

    {"version": 1, "kind": "group_index", "groups": ["Turma A", ...]}
    {"version": 1, "kind": "roster", "players": [{"name": "Ana", "team": "Time A"}, ...]}

Earlier releases of the app stored bare JSON arrays (a list of names for the
index, a list of ``{name, team}`` objects per roster). Those are still
accepted on decode and are rewritten in the versioned form on the next save.

Anything else is rejected with ``CorruptDataError``. A key that was never
written (``None``) decodes to an empty collection.
"""

import json
import logging
from typing import Annotated, Literal, Sequence

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError, field_validator

from team_roster.errors import CorruptDataError
from team_roster.models.team import Player, Team

logger = logging.getLogger(__name__)

CODEC_VERSION = 1

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class PlayerRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Name
    team: Team


class GroupIndexDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int = CODEC_VERSION
    kind: Literal["group_index"] = "group_index"
    groups: list[Name]

    @field_validator("groups")
    @classmethod
    def _unique_groups(cls, groups: list[str]) -> list[str]:
        if len(set(groups)) != len(groups):
            raise ValueError("duplicate group names")
        return groups


class RosterDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int = CODEC_VERSION
    kind: Literal["roster"] = "roster"
    players: list[PlayerRecord]

    @field_validator("players")
    @classmethod
    def _unique_players(cls, players: list[PlayerRecord]) -> list[PlayerRecord]:
        names = [p.name for p in players]
        if len(set(names)) != len(names):
            raise ValueError("duplicate player names")
        return players


def encode_index(groups: Sequence[str]) -> str:
    """Encode the list of group names, preserving order."""
    return GroupIndexDocument(groups=list(groups)).model_dump_json()


def decode_index(raw: str | None, key: str | None = None) -> list[str]:
    """Decode a stored group index. Raises CorruptDataError on bad input."""
    if raw is None:
        return []
    document = _decode(raw, GroupIndexDocument, "group_index", "groups", key)
    return list(document.groups)


def encode_roster(players: Sequence[Player]) -> str:
    """Encode a roster, preserving insertion order."""
    document = RosterDocument(
        players=[PlayerRecord(name=p.name, team=p.team) for p in players]
    )
    return document.model_dump_json()


def decode_roster(raw: str | None, key: str | None = None) -> list[Player]:
    """Decode a stored roster. Raises CorruptDataError on bad input."""
    if raw is None:
        return []
    document = _decode(raw, RosterDocument, "roster", "players", key)
    return [Player(name=p.name, team=p.team) for p in document.players]


def _decode(raw: str, model: type[BaseModel], kind: str, field: str, key: str | None):
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise CorruptDataError(f"Stored {kind} is not valid JSON.", key) from e

    if isinstance(payload, list):
        logger.warning(f"Upgrading legacy unversioned {kind} at key {key!r}")
        payload = {"version": CODEC_VERSION, "kind": kind, field: payload}

    if not isinstance(payload, dict):
        raise CorruptDataError(f"Stored {kind} has an unexpected shape.", key)

    version = payload.get("version")
    if version != CODEC_VERSION:
        raise CorruptDataError(f"Stored {kind} has unsupported version {version!r}.", key)
    if payload.get("kind") != kind:
        raise CorruptDataError(
            f"Expected a {kind} document, found {payload.get('kind')!r}.", key
        )

    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise CorruptDataError(f"Stored {kind} does not match its schema: {e}", key) from e
