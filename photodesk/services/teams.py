"""Team creation and membership views."""

import logging

from photodesk.core.errors import ForbiddenError, NotFoundError
from photodesk.schemas.teams import Team, TeamCreate, TeamMember, TeamRead
from photodesk.storage.base import Storage

logger = logging.getLogger(__name__)


def create_team(store: Storage, name: str, caller_user_id: int) -> Team:
    """Create a team owned by the caller and make the caller its first member."""
    team = store.create_team(TeamCreate(name=name, owner_id=caller_user_id))
    store.set_user_team(caller_user_id, team.id)
    logger.info("Team created: id=%s owner=%s", team.id, caller_user_id)
    return team


def _team_read(store: Storage, team: Team) -> TeamRead:
    members = [
        TeamMember.model_validate(u.model_dump()) for u in store.list_users_by_team(team.id)
    ]
    return TeamRead(**team.model_dump(), members=members)


def get_team_view(store: Storage, team_id: int, caller_user_id: int) -> TeamRead:
    """Team with its members; visible to the owner and to members."""
    team = store.get_team(team_id)
    if team is None:
        raise NotFoundError("Team not found")
    if team.owner_id != caller_user_id:
        caller = store.get_user(caller_user_id)
        if caller is None or caller.team_id != team_id:
            raise ForbiddenError("Not authorized to access this team")
    return _team_read(store, team)


def get_current_team(store: Storage, caller_user_id: int) -> TeamRead | None:
    """The team the caller belongs to, or None."""
    caller = store.get_user(caller_user_id)
    if caller is None or caller.team_id is None:
        return None
    team = store.get_team(caller.team_id)
    return _team_read(store, team) if team is not None else None
