"""Client portal: password gate, client-facing job view and client comments.

The portal channel is unauthenticated. A job without a password is open to anyone holding
its link; a protected job is Locked until a call supplies the right password, and the
unlocked state is not remembered between calls.
"""

import logging
from datetime import datetime, timedelta, timezone

from photodesk.core.config import get_settings
from photodesk.core.errors import NotFoundError, UnauthorizedError
from photodesk.core.security import new_portal_token
from photodesk.schemas.comments import PhotoJobComment, PhotoJobCommentCreate
from photodesk.schemas.job_status import ClientActions
from photodesk.schemas.photo_jobs import PhotoJob, PhotoJobUpdate
from photodesk.schemas.portal import PortalView
from photodesk.services.comments import require_content
from photodesk.services.job_status import allowed_client_actions, status_label, status_progress
from photodesk.services.photo_jobs import client_summary, get_owned_photo_job
from photodesk.storage.base import Storage

logger = logging.getLogger(__name__)

PORTAL_PATH_PREFIX = "/client-portal/"


def _load_job(store: Storage, job_id: int) -> PhotoJob:
    job = store.get_photo_job(job_id)
    if job is None:
        raise NotFoundError("Photo job not found")
    return job


def verify_portal_password(store: Storage, job_id: int, supplied_password: str | None) -> bool:
    """
    True when the job has no password or supplied_password matches it.

    A missing job raises NotFoundError; it is never reported as authorized.
    """
    job = _load_job(store, job_id)
    if not job.password:
        return True
    if supplied_password is None:
        return False
    return store.verify_photo_job_password(job_id, supplied_password)


def build_portal_view(store: Storage, job: PhotoJob, unlocked: bool) -> PortalView:
    """
    Project a job for the client. Never carries the password.

    A locked view is limited to title and status: job details, the client's contact data,
    the download link, client actions and comments are only shown once unlocked.
    """
    summary = {
        "id": job.id,
        "title": job.title,
        "status": job.status,
        "status_label": status_label(job.status),
        "progress": status_progress(job.status),
        "password_protected": bool(job.password),
    }
    if not unlocked:
        return PortalView(**summary, locked=True, actions=ClientActions())
    return PortalView(
        **summary,
        locked=False,
        description=job.description,
        job_date=job.job_date,
        end_date=job.end_date,
        download_link=job.download_link,
        download_expiry=job.download_expiry,
        client=client_summary(store, job.client_id),
        actions=allowed_client_actions(job.status),
        comments=store.list_comments_by_job(job.id),
    )


def get_portal_view(
    store: Storage, job_id: int, supplied_password: str | None = None
) -> PortalView:
    """Client-facing view of a job; a protected job stays locked without the right password."""
    job = _load_job(store, job_id)
    unlocked = verify_portal_password(store, job_id, supplied_password)
    return build_portal_view(store, job, unlocked)


def post_client_comment(
    store: Storage,
    job_id: int,
    content: str | None,
    supplied_password: str | None = None,
) -> PhotoJobComment:
    """
    Comment posted from the portal, always marked is_from_client=True.

    Raises NotFoundError (no job), ValidationError (empty content) or UnauthorizedError
    (password missing or wrong on a protected job).
    """
    job = _load_job(store, job_id)
    require_content(content)
    if job.password:
        if not supplied_password:
            raise UnauthorizedError("Password is required")
        if not store.verify_photo_job_password(job_id, supplied_password):
            logger.warning("Rejected portal comment with invalid password: job_id=%s", job_id)
            raise UnauthorizedError("Invalid password")
    comment = store.create_photo_job_comment(
        PhotoJobCommentCreate(job_id=job_id, content=content, is_from_client=True)
    )
    logger.info("Client comment posted: job_id=%s comment_id=%s", job_id, comment.id)
    return comment


def new_portal_path(job_id: int) -> str:
    """Unguessable portal path such as /client-portal/portal_7_Xk3...; the token is opaque."""
    return f"{PORTAL_PATH_PREFIX}portal_{job_id}_{new_portal_token()}"


def generate_portal_link(
    store: Storage,
    job_id: int,
    caller_user_id: int,
    password: str | None = None,
    now: datetime | None = None,
) -> PhotoJob:
    """
    Give a job a fresh portal link valid for PORTAL_LINK_EXPIRY_DAYS (owner only).

    A non-blank password protects the portal; a missing or blank one opens it.
    """
    get_owned_photo_job(store, job_id, caller_user_id)
    issued_at = now or datetime.now(timezone.utc)
    expiry = issued_at + timedelta(days=get_settings().PORTAL_LINK_EXPIRY_DAYS)
    # "" clears a previous password: the store hashes non-empty values and maps "" to None.
    portal_password = password if password and password.strip() else ""
    job = store.update_photo_job(
        job_id,
        PhotoJobUpdate(
            download_link=new_portal_path(job_id),
            download_expiry=expiry,
            password=portal_password,
        ),
    )
    logger.info(
        "Portal link generated: job_id=%s protected=%s expires=%s",
        job_id,
        bool(job.password),
        expiry.isoformat(),
    )
    return job
