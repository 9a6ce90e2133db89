"""Teams: the creator owns the team and becomes its first member."""

from typing import Annotated

from fastapi import APIRouter, Depends

from photodesk.api.routes.auth import get_current_user
from photodesk.schemas.auth import CurrentUser
from photodesk.schemas.teams import Team, TeamIn, TeamRead, TeamUpdate
from photodesk.services import teams as team_service
from photodesk.services.ownership import ensure_owner
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.post("", response_model=Team)
def create_team(
    body: TeamIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Team:
    return team_service.create_team(store, body.name, user.id)


@router.get("/current", response_model=TeamRead | None)
def get_current_team(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> TeamRead | None:
    """The caller's team with its members, or null when the caller has none."""
    return team_service.get_current_team(store, user.id)


@router.get("/{team_id}", response_model=TeamRead)
def get_team(
    team_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> TeamRead:
    return team_service.get_team_view(store, team_id, user.id)


@router.patch("/{team_id}", response_model=Team)
def update_team(
    team_id: int,
    body: TeamUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> Team:
    ensure_owner(store.get_team(team_id), user.id, "Team", owner_field="owner_id")
    return store.update_team(team_id, body)


@router.delete("/{team_id}")
def delete_team(
    team_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> dict[str, bool]:
    ensure_owner(store.get_team(team_id), user.id, "Team", owner_field="owner_id")
    store.delete_team(team_id)
    return {"success": True}
