"""REST endpoints for groups and their players."""

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from team_roster.errors import ErrorKind
from team_roster.models.results import RosterResult
from team_roster.services.roster_service import RosterService
from team_roster.utils.team_normalizer import normalize_team

router = APIRouter(prefix="/api/groups", tags=["groups"])

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.DUPLICATE_GROUP: 409,
    ErrorKind.DUPLICATE_PLAYER: 409,
    ErrorKind.GROUP_NOT_FOUND: 404,
    ErrorKind.PLAYER_NOT_FOUND: 404,
    ErrorKind.INVALID_INPUT: 422,
    ErrorKind.CORRUPT_DATA: 500,
    ErrorKind.STORAGE: 503,
}


class CreateGroupRequest(BaseModel):
    name: str


class AddPlayerRequest(BaseModel):
    name: str
    team: str


class GroupListResponse(BaseModel):
    groups: list[str]


class PlayerInfo(BaseModel):
    name: str
    team: str


class PlayerListResponse(BaseModel):
    """Players of a group, optionally filtered to one team."""

    group: str
    team: str | None
    count: int
    players: list[PlayerInfo]


def _service(request: Request) -> RosterService:
    return request.app.state.service


def _error_response(result: RosterResult) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS[result.error],
        content={"detail": result.message, "error": result.error.value},
    )


@router.get("", response_model=GroupListResponse)
async def list_groups(request: Request):
    result = await _service(request).list_groups()
    if not result.ok:
        return _error_response(result)
    return GroupListResponse(groups=result.value)


@router.post("", status_code=201, response_model=GroupListResponse)
async def create_group(request: Request, body: CreateGroupRequest):
    """Create a group. Responds with the updated group list."""
    service = _service(request)
    result = await service.create_group(body.name)
    if not result.ok:
        return _error_response(result)

    listing = await service.list_groups()
    if not listing.ok:
        return _error_response(listing)
    return GroupListResponse(groups=listing.value)


@router.delete("/{group}", status_code=204)
async def remove_group(request: Request, group: str):
    result = await _service(request).remove_group(group)
    if not result.ok:
        return _error_response(result)
    return Response(status_code=204)


@router.get("/{group}/players", response_model=PlayerListResponse)
async def list_players(
    request: Request,
    group: str,
    team: Annotated[str | None, Query(description="Team label, e.g. 'Time A'")] = None,
):
    service = _service(request)
    if team is None:
        result = await service.list_all_players(group)
    else:
        result = await service.list_players_by_team(group, team)
    if not result.ok:
        return _error_response(result)

    players = [PlayerInfo(**p.to_dict()) for p in result.value]
    return PlayerListResponse(
        group=group,
        team=normalize_team(team).value if team else None,
        count=len(players),
        players=players,
    )


@router.post("/{group}/players", status_code=201, response_model=PlayerInfo)
async def add_player(request: Request, group: str, body: AddPlayerRequest):
    result = await _service(request).add_player(body.name, body.team, group)
    if not result.ok:
        return _error_response(result)
    return PlayerInfo(**result.value.to_dict())


@router.delete("/{group}/players/{player}", status_code=204)
async def remove_player(
    request: Request,
    group: str,
    player: str,
    strict: bool = False,
):
    """Remove a player. Unknown players are ignored unless ``strict`` is set."""
    result = await _service(request).remove_player(player, group, missing_ok=not strict)
    if not result.ok:
        return _error_response(result)
    return Response(status_code=204)
