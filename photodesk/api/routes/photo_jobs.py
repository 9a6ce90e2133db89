"""Photo jobs of the authenticated photographer, their comments, portal links and password check."""

from typing import Annotated

from fastapi import APIRouter, Depends

from photodesk.api.routes.auth import get_current_user
from photodesk.core.errors import UnauthorizedError, ValidationError
from photodesk.schemas.auth import CurrentUser
from photodesk.schemas.comments import CommentIn, PhotoJobComment
from photodesk.schemas.photo_jobs import (
    PhotoJobIn,
    PhotoJobRead,
    PhotoJobUpdate,
    PortalLinkRequest,
)
from photodesk.schemas.portal import VerifyPasswordRequest, VerifyPasswordResponse
from photodesk.services import comments as comment_service
from photodesk.services import photo_jobs as job_service
from photodesk.services import portal as portal_service
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.get("", response_model=list[PhotoJobRead])
def list_photo_jobs(
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> list[PhotoJobRead]:
    """Caller's jobs, each joined with client name/email and comments."""
    return job_service.list_photo_jobs(store, user.id)


@router.post("", response_model=PhotoJobRead)
def create_photo_job(
    body: PhotoJobIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> PhotoJobRead:
    job = job_service.create_photo_job(store, user.id, body)
    return job_service.to_read_model(store, job)


@router.get("/{job_id}", response_model=PhotoJobRead)
def get_photo_job(
    job_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> PhotoJobRead:
    job = job_service.get_owned_photo_job(store, job_id, user.id)
    return job_service.to_read_model(store, job)


@router.patch("/{job_id}", response_model=PhotoJobRead)
def update_photo_job(
    job_id: int,
    body: PhotoJobUpdate,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> PhotoJobRead:
    job = job_service.update_photo_job(store, job_id, user.id, body)
    return job_service.to_read_model(store, job)


@router.delete("/{job_id}")
def delete_photo_job(
    job_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> dict[str, bool]:
    job_service.delete_photo_job(store, job_id, user.id)
    return {"success": True}


@router.post("/{job_id}/portal-link", response_model=PhotoJobRead)
def generate_portal_link(
    job_id: int,
    body: PortalLinkRequest,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> PhotoJobRead:
    """New client portal link (30 days by default); optional password protects the portal."""
    job = portal_service.generate_portal_link(store, job_id, user.id, password=body.password)
    return job_service.to_read_model(store, job)


@router.get("/{job_id}/comments", response_model=list[PhotoJobComment])
def list_comments(
    job_id: int,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> list[PhotoJobComment]:
    return comment_service.list_job_comments(store, job_id, user.id)


@router.post("/{job_id}/comments", response_model=PhotoJobComment)
def post_comment(
    job_id: int,
    body: CommentIn,
    user: Annotated[CurrentUser, Depends(get_current_user)],
    store: Annotated[Storage, Depends(get_storage)],
) -> PhotoJobComment:
    return comment_service.post_owner_comment(store, job_id, body.content, user.id)


@router.post("/{job_id}/verify-password", response_model=VerifyPasswordResponse)
def verify_password(
    job_id: int,
    body: VerifyPasswordRequest,
    store: Annotated[Storage, Depends(get_storage)],
) -> VerifyPasswordResponse:
    """Unauthenticated portal unlock: 400 without password, 401 on mismatch, 404 for unknown job."""
    if not body.password:
        raise ValidationError("Password is required")
    if not portal_service.verify_portal_password(store, job_id, body.password):
        raise UnauthorizedError("Invalid password")
    view = portal_service.get_portal_view(store, job_id, body.password)
    return VerifyPasswordResponse(success=True, job=view)
