"""SQL storage backend: the Storage contract over SQLAlchemy ORM models, one commit per mutation."""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from pydantic import BaseModel
from sqlalchemy import update
from sqlalchemy.orm import Session

from photodesk import models
from photodesk.core.errors import NotFoundError
from photodesk.core.security import hash_portal_password
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
from photodesk.storage.base import Storage, coalesced_changes

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SqlStorage(Storage):
    """Storage backed by a SQLAlchemy session; the caller owns the session lifecycle."""

    def __init__(self, db: Session, clock: Callable[[], datetime] | None = None) -> None:
        self.db = db
        self._clock = clock or _utcnow

    # Generic helpers

    def _get(self, model: type, record_id: int):
        return self.db.get(model, record_id)

    def _add(self, row):
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def _update(self, model: type, record_id: int, changes: BaseModel, missing: str, **extra):
        row = self.db.get(model, record_id)
        if row is None:
            raise NotFoundError(missing)
        values = coalesced_changes(changes)
        values.update(extra)
        for field, value in values.items():
            setattr(row, field, value)
        self.db.commit()
        self.db.refresh(row)
        return row

    def _delete(self, model: type, record_id: int) -> None:
        row = self.db.get(model, record_id)
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()

    # Users

    def get_user(self, user_id: int) -> User | None:
        row = self._get(models.User, user_id)
        return User.model_validate(row) if row is not None else None

    def get_user_by_username(self, username: str) -> User | None:
        row = self.db.query(models.User).filter(models.User.username == username).first()
        return User.model_validate(row) if row is not None else None

    def get_user_by_email(self, email: str) -> User | None:
        row = self.db.query(models.User).filter(models.User.email == email).first()
        return User.model_validate(row) if row is not None else None

    def create_user(self, data: UserCreate) -> User:
        return User.model_validate(self._add(models.User(**data.model_dump())))

    def update_user(self, user_id: int, changes: UserProfileUpdate) -> User:
        return User.model_validate(self._update(models.User, user_id, changes, "User not found"))

    def set_user_team(self, user_id: int, team_id: int | None) -> User:
        row = self.db.get(models.User, user_id)
        if row is None:
            raise NotFoundError("User not found")
        row.team_id = team_id
        self.db.commit()
        self.db.refresh(row)
        return User.model_validate(row)

    def list_users_by_team(self, team_id: int) -> list[User]:
        rows = (
            self.db.query(models.User)
            .filter(models.User.team_id == team_id)
            .order_by(models.User.id)
            .all()
        )
        return [User.model_validate(r) for r in rows]

    # Clients

    def get_client(self, client_id: int) -> Client | None:
        row = self._get(models.Client, client_id)
        return Client.model_validate(row) if row is not None else None

    def list_clients_by_user(self, user_id: int) -> list[Client]:
        rows = (
            self.db.query(models.Client)
            .filter(models.Client.user_id == user_id)
            .order_by(models.Client.id)
            .all()
        )
        return [Client.model_validate(r) for r in rows]

    def create_client(self, data: ClientCreate) -> Client:
        return Client.model_validate(self._add(models.Client(**data.model_dump())))

    def update_client(self, client_id: int, changes: ClientUpdate) -> Client:
        row = self._update(models.Client, client_id, changes, "Client not found")
        return Client.model_validate(row)

    def delete_client(self, client_id: int) -> None:
        row = self.db.get(models.Client, client_id)
        if row is None:
            return
        self.db.execute(
            update(models.Event)
            .where(models.Event.client_id == client_id)
            .values(client_id=None)
        )
        self.db.execute(
            update(models.PhotoJob)
            .where(models.PhotoJob.client_id == client_id)
            .values(client_id=None)
        )
        self.db.delete(row)
        self.db.commit()
        self.db.expire_all()

    # Equipment

    def get_equipment(self, equipment_id: int) -> Equipment | None:
        row = self._get(models.Equipment, equipment_id)
        return Equipment.model_validate(row) if row is not None else None

    def list_equipment_by_user(self, user_id: int) -> list[Equipment]:
        rows = (
            self.db.query(models.Equipment)
            .filter(models.Equipment.user_id == user_id)
            .order_by(models.Equipment.id)
            .all()
        )
        return [Equipment.model_validate(r) for r in rows]

    def create_equipment(self, data: EquipmentCreate) -> Equipment:
        return Equipment.model_validate(self._add(models.Equipment(**data.model_dump())))

    def update_equipment(self, equipment_id: int, changes: EquipmentUpdate) -> Equipment:
        row = self._update(models.Equipment, equipment_id, changes, "Equipment not found")
        return Equipment.model_validate(row)

    def delete_equipment(self, equipment_id: int) -> None:
        self._delete(models.Equipment, equipment_id)

    # Equipment presets

    def get_equipment_preset(self, preset_id: int) -> EquipmentPreset | None:
        row = self._get(models.EquipmentPreset, preset_id)
        return EquipmentPreset.model_validate(row) if row is not None else None

    def list_equipment_presets_by_user(self, user_id: int) -> list[EquipmentPreset]:
        rows = (
            self.db.query(models.EquipmentPreset)
            .filter(models.EquipmentPreset.user_id == user_id)
            .order_by(models.EquipmentPreset.id)
            .all()
        )
        return [EquipmentPreset.model_validate(r) for r in rows]

    def create_equipment_preset(self, data: EquipmentPresetCreate) -> EquipmentPreset:
        return EquipmentPreset.model_validate(self._add(models.EquipmentPreset(**data.model_dump())))

    def update_equipment_preset(
        self, preset_id: int, changes: EquipmentPresetUpdate
    ) -> EquipmentPreset:
        row = self._update(models.EquipmentPreset, preset_id, changes, "Equipment preset not found")
        return EquipmentPreset.model_validate(row)

    def delete_equipment_preset(self, preset_id: int) -> None:
        self._delete(models.EquipmentPreset, preset_id)

    # Events

    def get_event(self, event_id: int) -> Event | None:
        row = self._get(models.Event, event_id)
        return Event.model_validate(row) if row is not None else None

    def list_events_by_user(self, user_id: int) -> list[Event]:
        rows = (
            self.db.query(models.Event)
            .filter(models.Event.user_id == user_id)
            .order_by(models.Event.id)
            .all()
        )
        return [Event.model_validate(r) for r in rows]

    def create_event(self, data: EventCreate) -> Event:
        return Event.model_validate(self._add(models.Event(**data.model_dump())))

    def update_event(self, event_id: int, changes: EventUpdate) -> Event:
        row = self._update(models.Event, event_id, changes, "Event not found")
        return Event.model_validate(row)

    def delete_event(self, event_id: int) -> None:
        self._delete(models.Event, event_id)

    # Teams

    def get_team(self, team_id: int) -> Team | None:
        row = self._get(models.Team, team_id)
        return Team.model_validate(row) if row is not None else None

    def create_team(self, data: TeamCreate) -> Team:
        return Team.model_validate(self._add(models.Team(**data.model_dump())))

    def update_team(self, team_id: int, changes: TeamUpdate) -> Team:
        return Team.model_validate(self._update(models.Team, team_id, changes, "Team not found"))

    def delete_team(self, team_id: int) -> None:
        row = self.db.get(models.Team, team_id)
        if row is None:
            return
        # SQLite does not enforce ON DELETE SET NULL unless foreign keys are switched on.
        self.db.execute(
            update(models.User).where(models.User.team_id == team_id).values(team_id=None)
        )
        self.db.delete(row)
        self.db.commit()
        self.db.expire_all()

    # Photo jobs

    def get_photo_job(self, job_id: int) -> PhotoJob | None:
        row = self._get(models.PhotoJob, job_id)
        return PhotoJob.model_validate(row) if row is not None else None

    def list_photo_jobs_by_user(self, user_id: int) -> list[PhotoJob]:
        rows = (
            self.db.query(models.PhotoJob)
            .filter(models.PhotoJob.user_id == user_id)
            .order_by(models.PhotoJob.id)
            .all()
        )
        return [PhotoJob.model_validate(r) for r in rows]

    def list_photo_jobs_by_client(self, client_id: int) -> list[PhotoJob]:
        rows = (
            self.db.query(models.PhotoJob)
            .filter(models.PhotoJob.client_id == client_id)
            .order_by(models.PhotoJob.id)
            .all()
        )
        return [PhotoJob.model_validate(r) for r in rows]

    def create_photo_job(self, data: PhotoJobCreate) -> PhotoJob:
        now = self._clock()
        fields = data.model_dump()
        fields["password"] = hash_portal_password(data.password)
        row = self._add(models.PhotoJob(created_at=now, updated_at=now, **fields))
        logger.debug("Created photo job id=%s user_id=%s", row.id, row.user_id)
        return PhotoJob.model_validate(row)

    def update_photo_job(self, job_id: int, changes: PhotoJobUpdate) -> PhotoJob:
        extra: dict[str, object] = {"updated_at": self._clock()}
        if changes.password is not None:
            extra["password"] = hash_portal_password(changes.password)
        row = self._update(models.PhotoJob, job_id, changes, "Photo job not found", **extra)
        return PhotoJob.model_validate(row)

    def delete_photo_job(self, job_id: int) -> None:
        row = self.db.get(models.PhotoJob, job_id)
        if row is None:
            return
        self.db.delete(row)
        self.db.commit()
        self.db.expire_all()

    # Photo job comments

    def get_photo_job_comment(self, comment_id: int) -> PhotoJobComment | None:
        row = self._get(models.PhotoJobComment, comment_id)
        return PhotoJobComment.model_validate(row) if row is not None else None

    def list_comments_by_job(self, job_id: int) -> list[PhotoJobComment]:
        rows = (
            self.db.query(models.PhotoJobComment)
            .filter(models.PhotoJobComment.job_id == job_id)
            .order_by(
                models.PhotoJobComment.created_at.desc(),
                models.PhotoJobComment.id.desc(),
            )
            .all()
        )
        return [PhotoJobComment.model_validate(r) for r in rows]

    def create_photo_job_comment(self, data: PhotoJobCommentCreate) -> PhotoJobComment:
        if self.db.get(models.PhotoJob, data.job_id) is None:
            raise NotFoundError("Photo job not found")
        now = self._clock()
        row = self._add(models.PhotoJobComment(created_at=now, updated_at=now, **data.model_dump()))
        return PhotoJobComment.model_validate(row)

    def update_photo_job_comment(
        self, comment_id: int, changes: PhotoJobCommentUpdate
    ) -> PhotoJobComment:
        row = self._update(
            models.PhotoJobComment,
            comment_id,
            changes,
            "Photo job comment not found",
            updated_at=self._clock(),
        )
        return PhotoJobComment.model_validate(row)
