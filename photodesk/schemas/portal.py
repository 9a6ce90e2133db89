"""Pydantic schemas for the unauthenticated client portal."""

from pydantic import BaseModel, Field

from photodesk.schemas.clients import ClientSummary
from photodesk.schemas.comments import PhotoJobComment
from photodesk.schemas.job_status import ClientActions, JobStatus
from photodesk.schemas.types import UtcDateTime


class PortalView(BaseModel):
    """
    Client-facing projection of a photo job.

    There is intentionally no password field: the portal password (or its hash) can never
    be serialized from this model. While locked only id, title, status, progress and the
    lock flags are set; details, client, download link and comments stay empty.
    """

    id: int
    title: str
    description: str | None = None
    status: JobStatus
    status_label: str
    progress: float
    job_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    download_link: str | None = None
    download_expiry: UtcDateTime | None = None
    client: ClientSummary | None = None
    password_protected: bool
    locked: bool
    actions: ClientActions
    comments: list[PhotoJobComment] = Field(default_factory=list)


class VerifyPasswordRequest(BaseModel):
    password: str | None = Field(default=None, max_length=128)


class VerifyPasswordResponse(BaseModel):
    success: bool
    job: PortalView


class ClientCommentRequest(BaseModel):
    """Comment posted by a client; password is required only for protected jobs."""

    content: str = Field(default="", max_length=5000)
    password: str | None = Field(default=None, max_length=128)
