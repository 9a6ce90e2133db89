"""In-process reference store: one locked table per entity type with its own id counter.

Not shared between processes; every server instance has its own data. Suitable for
development, demos and tests. Use the SQL backend for anything that must survive a restart.
"""

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Generic

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
from photodesk.storage.base import RecordT, Storage, merge_update

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class _Table(Generic[RecordT]):
    """Id counter and rows of one entity type. Callers hold `lock` around every access."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.lock = threading.Lock()
        self.rows: dict[int, RecordT] = {}
        self._next_id = 1

    def allocate_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def get(self, record_id: int) -> RecordT | None:
        with self.lock:
            row = self.rows.get(record_id)
            return row.model_copy(deep=True) if row is not None else None

    def find(self, predicate: Callable[[RecordT], bool]) -> list[RecordT]:
        """Matching rows in insertion order."""
        with self.lock:
            return [r.model_copy(deep=True) for r in self.rows.values() if predicate(r)]

    def insert(self, build: Callable[[int], RecordT]) -> RecordT:
        with self.lock:
            record = build(self.allocate_id())
            self.rows[record.id] = record
            return record.model_copy(deep=True)

    def replace(self, record_id: int, apply: Callable[[RecordT], RecordT], missing: str) -> RecordT:
        with self.lock:
            current = self.rows.get(record_id)
            if current is None:
                raise NotFoundError(missing)
            updated = apply(current)
            self.rows[record_id] = updated
            return updated.model_copy(deep=True)

    def remove(self, record_id: int) -> None:
        with self.lock:
            self.rows.pop(record_id, None)


class MemStorage(Storage):
    """
    Reference Storage implementation backed by dicts.

    Each table has its own lock. Operations spanning tables take locks in a fixed order
    (users before teams; clients, events, photo jobs, comments) so concurrent cascades
    cannot deadlock.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None) -> None:
        self._clock = clock or _utcnow
        self._users: _Table[User] = _Table("users")
        self._clients: _Table[Client] = _Table("clients")
        self._equipment: _Table[Equipment] = _Table("equipment")
        self._presets: _Table[EquipmentPreset] = _Table("equipment_presets")
        self._events: _Table[Event] = _Table("events")
        self._teams: _Table[Team] = _Table("teams")
        self._photo_jobs: _Table[PhotoJob] = _Table("photo_jobs")
        self._comments: _Table[PhotoJobComment] = _Table("photo_job_comments")

    # Users

    def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        found = self._users.find(lambda u: u.username == username)
        return found[0] if found else None

    def get_user_by_email(self, email: str) -> User | None:
        found = self._users.find(lambda u: u.email == email)
        return found[0] if found else None

    def create_user(self, data: UserCreate) -> User:
        return self._users.insert(lambda new_id: User(id=new_id, **data.model_dump()))

    def update_user(self, user_id: int, changes: UserProfileUpdate) -> User:
        return self._users.replace(user_id, lambda u: merge_update(u, changes), "User not found")

    def set_user_team(self, user_id: int, team_id: int | None) -> User:
        return self._users.replace(
            user_id, lambda u: u.model_copy(update={"team_id": team_id}), "User not found"
        )

    def list_users_by_team(self, team_id: int) -> list[User]:
        return self._users.find(lambda u: u.team_id == team_id)

    # Clients

    def get_client(self, client_id: int) -> Client | None:
        return self._clients.get(client_id)

    def list_clients_by_user(self, user_id: int) -> list[Client]:
        return self._clients.find(lambda c: c.user_id == user_id)

    def create_client(self, data: ClientCreate) -> Client:
        return self._clients.insert(lambda new_id: Client(id=new_id, **data.model_dump()))

    def update_client(self, client_id: int, changes: ClientUpdate) -> Client:
        return self._clients.replace(
            client_id, lambda c: merge_update(c, changes), "Client not found"
        )

    def delete_client(self, client_id: int) -> None:
        with self._clients.lock, self._events.lock, self._photo_jobs.lock:
            self._clients.rows.pop(client_id, None)
            for event_id, event in list(self._events.rows.items()):
                if event.client_id == client_id:
                    self._events.rows[event_id] = event.model_copy(update={"client_id": None})
            for job_id, job in list(self._photo_jobs.rows.items()):
                if job.client_id == client_id:
                    self._photo_jobs.rows[job_id] = job.model_copy(update={"client_id": None})

    # Equipment

    def get_equipment(self, equipment_id: int) -> Equipment | None:
        return self._equipment.get(equipment_id)

    def list_equipment_by_user(self, user_id: int) -> list[Equipment]:
        return self._equipment.find(lambda e: e.user_id == user_id)

    def create_equipment(self, data: EquipmentCreate) -> Equipment:
        return self._equipment.insert(lambda new_id: Equipment(id=new_id, **data.model_dump()))

    def update_equipment(self, equipment_id: int, changes: EquipmentUpdate) -> Equipment:
        return self._equipment.replace(
            equipment_id, lambda e: merge_update(e, changes), "Equipment not found"
        )

    def delete_equipment(self, equipment_id: int) -> None:
        self._equipment.remove(equipment_id)

    # Equipment presets

    def get_equipment_preset(self, preset_id: int) -> EquipmentPreset | None:
        return self._presets.get(preset_id)

    def list_equipment_presets_by_user(self, user_id: int) -> list[EquipmentPreset]:
        return self._presets.find(lambda p: p.user_id == user_id)

    def create_equipment_preset(self, data: EquipmentPresetCreate) -> EquipmentPreset:
        return self._presets.insert(lambda new_id: EquipmentPreset(id=new_id, **data.model_dump()))

    def update_equipment_preset(
        self, preset_id: int, changes: EquipmentPresetUpdate
    ) -> EquipmentPreset:
        return self._presets.replace(
            preset_id, lambda p: merge_update(p, changes), "Equipment preset not found"
        )

    def delete_equipment_preset(self, preset_id: int) -> None:
        self._presets.remove(preset_id)

    # Events

    def get_event(self, event_id: int) -> Event | None:
        return self._events.get(event_id)

    def list_events_by_user(self, user_id: int) -> list[Event]:
        return self._events.find(lambda e: e.user_id == user_id)

    def create_event(self, data: EventCreate) -> Event:
        return self._events.insert(lambda new_id: Event(id=new_id, **data.model_dump()))

    def update_event(self, event_id: int, changes: EventUpdate) -> Event:
        return self._events.replace(
            event_id, lambda e: merge_update(e, changes), "Event not found"
        )

    def delete_event(self, event_id: int) -> None:
        self._events.remove(event_id)

    # Teams

    def get_team(self, team_id: int) -> Team | None:
        return self._teams.get(team_id)

    def create_team(self, data: TeamCreate) -> Team:
        return self._teams.insert(lambda new_id: Team(id=new_id, **data.model_dump()))

    def update_team(self, team_id: int, changes: TeamUpdate) -> Team:
        return self._teams.replace(team_id, lambda t: merge_update(t, changes), "Team not found")

    def delete_team(self, team_id: int) -> None:
        with self._users.lock, self._teams.lock:
            self._teams.rows.pop(team_id, None)
            for user_id, user in list(self._users.rows.items()):
                if user.team_id == team_id:
                    self._users.rows[user_id] = user.model_copy(update={"team_id": None})

    # Photo jobs

    def get_photo_job(self, job_id: int) -> PhotoJob | None:
        return self._photo_jobs.get(job_id)

    def list_photo_jobs_by_user(self, user_id: int) -> list[PhotoJob]:
        return self._photo_jobs.find(lambda j: j.user_id == user_id)

    def list_photo_jobs_by_client(self, client_id: int) -> list[PhotoJob]:
        return self._photo_jobs.find(lambda j: j.client_id == client_id)

    def create_photo_job(self, data: PhotoJobCreate) -> PhotoJob:
        password_hash = hash_portal_password(data.password)
        now = self._clock()

        def build(new_id: int) -> PhotoJob:
            fields = data.model_dump()
            fields["password"] = password_hash
            return PhotoJob(id=new_id, created_at=now, updated_at=now, **fields)

        job = self._photo_jobs.insert(build)
        logger.debug("Created photo job id=%s user_id=%s", job.id, job.user_id)
        return job

    def update_photo_job(self, job_id: int, changes: PhotoJobUpdate) -> PhotoJob:
        extra: dict[str, object] = {"updated_at": self._clock()}
        if changes.password is not None:
            extra["password"] = hash_portal_password(changes.password)
        return self._photo_jobs.replace(
            job_id, lambda j: merge_update(j, changes, **extra), "Photo job not found"
        )

    def delete_photo_job(self, job_id: int) -> None:
        with self._photo_jobs.lock, self._comments.lock:
            self._photo_jobs.rows.pop(job_id, None)
            orphaned = [cid for cid, c in self._comments.rows.items() if c.job_id == job_id]
            for comment_id in orphaned:
                del self._comments.rows[comment_id]
        logger.debug("Deleted photo job id=%s with %s comments", job_id, len(orphaned))

    # Photo job comments

    def get_photo_job_comment(self, comment_id: int) -> PhotoJobComment | None:
        return self._comments.get(comment_id)

    def list_comments_by_job(self, job_id: int) -> list[PhotoJobComment]:
        comments = self._comments.find(lambda c: c.job_id == job_id)
        return sorted(comments, key=lambda c: (c.created_at, c.id), reverse=True)

    def create_photo_job_comment(self, data: PhotoJobCommentCreate) -> PhotoJobComment:
        now = self._clock()
        # Job lock held across the insert so a concurrent delete cannot orphan the comment.
        with self._photo_jobs.lock, self._comments.lock:
            if data.job_id not in self._photo_jobs.rows:
                raise NotFoundError("Photo job not found")
            comment = PhotoJobComment(
                id=self._comments.allocate_id(), created_at=now, updated_at=now, **data.model_dump()
            )
            self._comments.rows[comment.id] = comment
            return comment.model_copy(deep=True)

    def update_photo_job_comment(
        self, comment_id: int, changes: PhotoJobCommentUpdate
    ) -> PhotoJobComment:
        now = self._clock()
        return self._comments.replace(
            comment_id,
            lambda c: merge_update(c, changes, updated_at=now),
            "Photo job comment not found",
        )
