"""Owner-channel operations on photo jobs: create, read with joins, update, delete."""

import logging

from photodesk.schemas.clients import ClientSummary
from photodesk.schemas.photo_jobs import (
    PhotoJob,
    PhotoJobCreate,
    PhotoJobIn,
    PhotoJobRead,
    PhotoJobUpdate,
)
from photodesk.services.job_status import parse_status, status_label, status_progress
from photodesk.services.ownership import ensure_owner
from photodesk.storage.base import Storage

logger = logging.getLogger(__name__)


def client_summary(store: Storage, client_id: int | None) -> ClientSummary | None:
    """Name and email of the job's client, or None if unset or deleted."""
    if client_id is None:
        return None
    client = store.get_client(client_id)
    if client is None:
        return None
    return ClientSummary(name=client.name, email=client.email)


def to_read_model(store: Storage, job: PhotoJob) -> PhotoJobRead:
    """Owner view of a job joined with its client and comments (newest first)."""
    fields = job.model_dump(exclude={"password"})
    return PhotoJobRead(
        **fields,
        status_label=status_label(job.status),
        progress=status_progress(job.status),
        has_password=bool(job.password),
        client=client_summary(store, job.client_id),
        comments=store.list_comments_by_job(job.id),
    )


def get_owned_photo_job(store: Storage, job_id: int, caller_user_id: int) -> PhotoJob:
    """Job if it exists and belongs to the caller (NotFoundError / ForbiddenError otherwise)."""
    return ensure_owner(store.get_photo_job(job_id), caller_user_id, "Photo job")


def list_photo_jobs(store: Storage, caller_user_id: int) -> list[PhotoJobRead]:
    return [to_read_model(store, job) for job in store.list_photo_jobs_by_user(caller_user_id)]


def create_photo_job(store: Storage, caller_user_id: int, data: PhotoJobIn) -> PhotoJob:
    """
    Create a job for the caller. The client must be one of the caller's clients.
    Status defaults to TBC when not given.
    """
    ensure_owner(store.get_client(data.client_id), caller_user_id, "Client")
    parse_status(data.status)
    job = store.create_photo_job(PhotoJobCreate(**data.model_dump(), user_id=caller_user_id))
    logger.info("Photo job created: id=%s user_id=%s status=%s", job.id, job.user_id, job.status)
    return job


def update_photo_job(
    store: Storage, job_id: int, caller_user_id: int, changes: PhotoJobUpdate
) -> PhotoJob:
    """Owner-checked partial update; any valid status may be set, no transition graph."""
    current = get_owned_photo_job(store, job_id, caller_user_id)
    if changes.client_id is not None:
        ensure_owner(store.get_client(changes.client_id), caller_user_id, "Client")
    if changes.status is not None:
        parse_status(changes.status)
    job = store.update_photo_job(job_id, changes)
    if job.status != current.status:
        logger.info(
            "Photo job status changed: id=%s %s -> %s", job_id, current.status, job.status
        )
    return job


def delete_photo_job(store: Storage, job_id: int, caller_user_id: int) -> None:
    """Owner-checked delete; the job's comments go with it."""
    get_owned_photo_job(store, job_id, caller_user_id)
    store.delete_photo_job(job_id)
    logger.info("Photo job deleted: id=%s user_id=%s", job_id, caller_user_id)
