"""SQLAlchemy ORM models."""

from photodesk.models.base import Base
from photodesk.models.photo_job import PhotoJob, PhotoJobComment
from photodesk.models.studio import Client, Equipment, EquipmentPreset, Event
from photodesk.models.user import Team, User

__all__ = [
    "Base",
    "Client",
    "Equipment",
    "EquipmentPreset",
    "Event",
    "PhotoJob",
    "PhotoJobComment",
    "Team",
    "User",
]
