"""Pydantic schemas for teams."""

from pydantic import BaseModel, ConfigDict, Field

from photodesk.schemas.users import UserRole


class TeamIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class TeamCreate(TeamIn):
    owner_id: int


class TeamUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)


class Team(TeamCreate):
    """Stored team record; owner_id is the creating user."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class TeamMember(BaseModel):
    """Public view of a user belonging to a team."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    role: UserRole


class TeamRead(Team):
    """Team with the users whose team_id points at it."""

    members: list[TeamMember] = Field(default_factory=list)
