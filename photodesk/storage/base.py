"""Storage contract shared by the in-memory and SQL backends, plus the update-merge rule."""

from abc import ABC, abstractmethod
from typing import TypeVar

from pydantic import BaseModel

from photodesk.core.security import verify_password
from photodesk.schemas.clients import Client, ClientCreate, ClientUpdate
from photodesk.schemas.comments import (
    PhotoJobComment,
    PhotoJobCommentCreate,
    PhotoJobCommentUpdate,
)
from photodesk.schemas.equipment import (
    Equipment,
    EquipmentCreate,
    EquipmentPreset,
    EquipmentPresetCreate,
    EquipmentPresetUpdate,
    EquipmentUpdate,
)
from photodesk.schemas.events import Event, EventCreate, EventUpdate
from photodesk.schemas.photo_jobs import PhotoJob, PhotoJobCreate, PhotoJobUpdate
from photodesk.schemas.teams import Team, TeamCreate, TeamUpdate
from photodesk.schemas.users import User, UserCreate, UserProfileUpdate

RecordT = TypeVar("RecordT", bound=BaseModel)


def coalesced_changes(changes: BaseModel) -> dict:
    """
    Fields of a partial update that carry a value.

    A None in the update means "keep what is stored", so an optional field cannot be
    cleared back to None through update once it has been set.
    """
    return {field: value for field, value in changes.model_dump().items() if value is not None}


def merge_update(record: RecordT, changes: BaseModel, **extra: object) -> RecordT:
    """Return a copy of record with the non-None fields of changes (and extra) applied."""
    updates = coalesced_changes(changes)
    updates.update(extra)
    return record.model_copy(update=updates, deep=True)


class Storage(ABC):
    """
    CRUD per entity type, owner-scoped listing and the cascade rules.

    Reads return None for a missing id and deletes are no-ops for a missing id;
    only update raises NotFoundError.
    """

    # Users

    @abstractmethod
    def get_user(self, user_id: int) -> User | None: ...

    @abstractmethod
    def get_user_by_username(self, username: str) -> User | None: ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None: ...

    @abstractmethod
    def create_user(self, data: UserCreate) -> User: ...

    @abstractmethod
    def update_user(self, user_id: int, changes: UserProfileUpdate) -> User: ...

    @abstractmethod
    def set_user_team(self, user_id: int, team_id: int | None) -> User:
        """Point the user at a team, or detach them with None."""

    @abstractmethod
    def list_users_by_team(self, team_id: int) -> list[User]: ...

    # Clients

    @abstractmethod
    def get_client(self, client_id: int) -> Client | None: ...

    @abstractmethod
    def list_clients_by_user(self, user_id: int) -> list[Client]: ...

    @abstractmethod
    def create_client(self, data: ClientCreate) -> Client: ...

    @abstractmethod
    def update_client(self, client_id: int, changes: ClientUpdate) -> Client: ...

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete the client and null client_id on events and photo jobs that referenced it."""

    # Equipment

    @abstractmethod
    def get_equipment(self, equipment_id: int) -> Equipment | None: ...

    @abstractmethod
    def list_equipment_by_user(self, user_id: int) -> list[Equipment]: ...

    @abstractmethod
    def create_equipment(self, data: EquipmentCreate) -> Equipment: ...

    @abstractmethod
    def update_equipment(self, equipment_id: int, changes: EquipmentUpdate) -> Equipment: ...

    @abstractmethod
    def delete_equipment(self, equipment_id: int) -> None: ...

    # Equipment presets

    @abstractmethod
    def get_equipment_preset(self, preset_id: int) -> EquipmentPreset | None: ...

    @abstractmethod
    def list_equipment_presets_by_user(self, user_id: int) -> list[EquipmentPreset]: ...

    @abstractmethod
    def create_equipment_preset(self, data: EquipmentPresetCreate) -> EquipmentPreset: ...

    @abstractmethod
    def update_equipment_preset(
        self, preset_id: int, changes: EquipmentPresetUpdate
    ) -> EquipmentPreset: ...

    @abstractmethod
    def delete_equipment_preset(self, preset_id: int) -> None: ...

    # Events

    @abstractmethod
    def get_event(self, event_id: int) -> Event | None: ...

    @abstractmethod
    def list_events_by_user(self, user_id: int) -> list[Event]: ...

    @abstractmethod
    def create_event(self, data: EventCreate) -> Event: ...

    @abstractmethod
    def update_event(self, event_id: int, changes: EventUpdate) -> Event: ...

    @abstractmethod
    def delete_event(self, event_id: int) -> None: ...

    # Teams

    @abstractmethod
    def get_team(self, team_id: int) -> Team | None: ...

    @abstractmethod
    def create_team(self, data: TeamCreate) -> Team: ...

    @abstractmethod
    def update_team(self, team_id: int, changes: TeamUpdate) -> Team: ...

    @abstractmethod
    def delete_team(self, team_id: int) -> None:
        """Delete the team and detach its members (their team_id becomes None)."""

    # Photo jobs

    @abstractmethod
    def get_photo_job(self, job_id: int) -> PhotoJob | None: ...

    @abstractmethod
    def list_photo_jobs_by_user(self, user_id: int) -> list[PhotoJob]: ...

    @abstractmethod
    def list_photo_jobs_by_client(self, client_id: int) -> list[PhotoJob]: ...

    @abstractmethod
    def create_photo_job(self, data: PhotoJobCreate) -> PhotoJob:
        """Store a job; status defaults to TBC and the portal password is stored hashed."""

    @abstractmethod
    def update_photo_job(self, job_id: int, changes: PhotoJobUpdate) -> PhotoJob:
        """Merge changes, re-hash a new portal password and refresh updated_at."""

    @abstractmethod
    def delete_photo_job(self, job_id: int) -> None:
        """Delete the job together with all of its comments."""

    def verify_photo_job_password(self, job_id: int, password: str) -> bool:
        """False for a missing job, True for a job without password, else hash comparison."""
        job = self.get_photo_job(job_id)
        if job is None:
            return False
        if not job.password:
            return True
        return verify_password(password, job.password)

    # Photo job comments

    @abstractmethod
    def get_photo_job_comment(self, comment_id: int) -> PhotoJobComment | None: ...

    @abstractmethod
    def list_comments_by_job(self, job_id: int) -> list[PhotoJobComment]:
        """Comments of a job, newest first."""

    @abstractmethod
    def create_photo_job_comment(self, data: PhotoJobCommentCreate) -> PhotoJobComment:
        """Attach a comment to an existing job; NotFoundError if the job is gone."""

    @abstractmethod
    def update_photo_job_comment(
        self, comment_id: int, changes: PhotoJobCommentUpdate
    ) -> PhotoJobComment: ...
