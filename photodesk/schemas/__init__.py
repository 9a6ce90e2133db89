"""Pydantic request/response schemas and store records."""

from photodesk.schemas.clients import Client, ClientIn, ClientSummary, ClientUpdate
from photodesk.schemas.comments import CommentIn, PhotoJobComment
from photodesk.schemas.equipment import (
    Equipment,
    EquipmentIn,
    EquipmentPreset,
    EquipmentPresetIn,
    EquipmentPresetUpdate,
    EquipmentUpdate,
)
from photodesk.schemas.events import Event, EventIn, EventUpdate
from photodesk.schemas.health import HealthResponse
from photodesk.schemas.job_status import ClientActions, JobStatus, JobStatusInfo
from photodesk.schemas.photo_jobs import PhotoJob, PhotoJobIn, PhotoJobRead, PhotoJobUpdate
from photodesk.schemas.portal import PortalView
from photodesk.schemas.teams import Team, TeamIn, TeamMember, TeamRead, TeamUpdate
from photodesk.schemas.users import User, UserProfileUpdate, UserRead

__all__ = [
    "Client",
    "ClientActions",
    "ClientIn",
    "ClientSummary",
    "ClientUpdate",
    "CommentIn",
    "Equipment",
    "EquipmentIn",
    "EquipmentPreset",
    "EquipmentPresetIn",
    "EquipmentPresetUpdate",
    "EquipmentUpdate",
    "Event",
    "EventIn",
    "EventUpdate",
    "HealthResponse",
    "JobStatus",
    "JobStatusInfo",
    "PhotoJob",
    "PhotoJobComment",
    "PhotoJobIn",
    "PhotoJobRead",
    "PhotoJobUpdate",
    "PortalView",
    "Team",
    "TeamIn",
    "TeamMember",
    "TeamRead",
    "TeamUpdate",
    "User",
    "UserProfileUpdate",
    "UserRead",
]
