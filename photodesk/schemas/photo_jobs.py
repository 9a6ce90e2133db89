"""Pydantic schemas for photo jobs: store record, store inputs and owner-channel read model."""

from pydantic import BaseModel, ConfigDict, Field

from photodesk.schemas.clients import ClientSummary
from photodesk.schemas.comments import PhotoJobComment
from photodesk.schemas.job_status import DEFAULT_JOB_STATUS, JobStatus
from photodesk.schemas.types import UtcDateTime


class PhotoJobIn(BaseModel):
    """Photo job fields accepted from the API; the owner comes from the bearer token."""

    client_id: int
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    status: JobStatus = DEFAULT_JOB_STATUS
    amount: int | None = Field(default=None, ge=0)
    job_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    download_link: str | None = None
    download_expiry: UtcDateTime | None = None
    password: str | None = Field(default=None, max_length=128, description="Client portal password.")
    equipment_ids: list[int] | None = None


class PhotoJobCreate(PhotoJobIn):
    """Store input for a new photo job."""

    user_id: int


class PhotoJobUpdate(BaseModel):
    """
    Partial update; None keeps the stored value.

    user_id is deliberately absent: a job never changes owner.
    """

    client_id: int | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    status: JobStatus | None = None
    amount: int | None = Field(default=None, ge=0)
    job_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    download_link: str | None = None
    download_expiry: UtcDateTime | None = None
    password: str | None = Field(default=None, max_length=128)
    equipment_ids: list[int] | None = None


class PhotoJob(BaseModel):
    """
    Stored photo job record.

    password holds the bcrypt hash of the portal password, or None when the portal is open.
    client_id becomes None when the referenced client is deleted.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    client_id: int | None
    title: str
    description: str | None = None
    status: JobStatus = DEFAULT_JOB_STATUS
    amount: int | None = None
    job_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    download_link: str | None = None
    download_expiry: UtcDateTime | None = None
    password: str | None = None
    equipment_ids: list[int] | None = None
    created_at: UtcDateTime
    updated_at: UtcDateTime


class PhotoJobRead(BaseModel):
    """Photo job as returned to its owner, joined with client and comments. No password material."""

    id: int
    user_id: int
    client_id: int | None
    title: str
    description: str | None = None
    status: JobStatus
    status_label: str
    progress: float
    amount: int | None = None
    job_date: UtcDateTime | None = None
    end_date: UtcDateTime | None = None
    download_link: str | None = None
    download_expiry: UtcDateTime | None = None
    has_password: bool = False
    equipment_ids: list[int] | None = None
    created_at: UtcDateTime
    updated_at: UtcDateTime
    client: ClientSummary | None = None
    comments: list[PhotoJobComment] = Field(default_factory=list)


class PortalLinkRequest(BaseModel):
    """Optional portal password set together with a freshly generated portal link."""

    password: str | None = Field(default=None, max_length=128)
