"""Unauthenticated client portal: job view and client comments, gated by the job's password."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header

from photodesk.schemas.comments import PhotoJobComment
from photodesk.schemas.portal import ClientCommentRequest, PortalView
from photodesk.services import portal as portal_service
from photodesk.storage import Storage, get_storage

router = APIRouter()


@router.get("/{job_id}", response_model=PortalView)
def get_portal(
    job_id: int,
    store: Annotated[Storage, Depends(get_storage)],
    x_portal_password: Annotated[str | None, Header()] = None,
) -> PortalView:
    """
    Client-facing job view. Protected jobs return locked=true and no comments unless the
    X-Portal-Password header carries the right password.
    """
    return portal_service.get_portal_view(store, job_id, x_portal_password)


@router.post("/{job_id}/comments", response_model=PhotoJobComment)
def post_client_comment(
    job_id: int,
    body: ClientCommentRequest,
    store: Annotated[Storage, Depends(get_storage)],
) -> PhotoJobComment:
    return portal_service.post_client_comment(store, job_id, body.content, body.password)
