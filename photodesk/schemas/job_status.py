"""Pydantic schemas and literals for the photo-job lifecycle."""

from typing import Literal

from pydantic import BaseModel, Field

JobStatus = Literal[
    "TBC",
    "CONFIRMED",
    "DOWNLOADED",
    "IN_PROGRESS",
    "READY_FOR_DOWNLOAD",
    "READY_FOR_REVIEW",
    "PENDING_PAYMENT",
    "COMPLETED",
]

# Lifecycle order; drives progress and the status catalog. Not an enforced transition graph.
JOB_STATUS_ORDER: tuple[str, ...] = (
    "TBC",
    "CONFIRMED",
    "DOWNLOADED",
    "IN_PROGRESS",
    "READY_FOR_DOWNLOAD",
    "READY_FOR_REVIEW",
    "PENDING_PAYMENT",
    "COMPLETED",
)

JOB_STATUS_VALUES: frozenset[str] = frozenset(JOB_STATUS_ORDER)

DEFAULT_JOB_STATUS: JobStatus = "TBC"


class ClientActions(BaseModel):
    """What a client may do from the portal for the job's current status."""

    can_comment: bool = False
    can_approve: bool = False


class JobStatusInfo(BaseModel):
    """One entry of the status catalog."""

    value: JobStatus
    label: str
    progress: float = Field(..., ge=0, le=100, description="Completion percentage for this status.")
