"""Photo-job status model: progress, display labels and client-portal gating.

The status list is ordered but transitions are not enforced: any caller with write access
may move a job to any status. Progress uses all eight states, so TBC already shows 12.5%.
"""

from photodesk.core.errors import ValidationError
from photodesk.schemas.job_status import (
    JOB_STATUS_ORDER,
    JOB_STATUS_VALUES,
    ClientActions,
    JobStatus,
    JobStatusInfo,
)

STATUS_LABELS: dict[str, str] = {
    "TBC": "Awaiting confirmation",
    "CONFIRMED": "Job confirmed",
    "DOWNLOADED": "Files downloaded",
    "IN_PROGRESS": "In progress",
    "READY_FOR_DOWNLOAD": "Ready for download",
    "READY_FOR_REVIEW": "Ready for review",
    "PENDING_PAYMENT": "Awaiting payment",
    "COMPLETED": "Completed",
}

# Status in which the client may comment on and approve the delivered work.
CLIENT_REVIEW_STATUS = "READY_FOR_REVIEW"


def parse_status(value: str) -> JobStatus:
    """Return value as a JobStatus or raise ValidationError for anything outside the enum."""
    if value not in JOB_STATUS_VALUES:
        raise ValidationError(
            f"status must be one of {list(JOB_STATUS_ORDER)}, got {value!r}"
        )
    return value  # type: ignore[return-value]


def status_progress(status: str | None) -> float:
    """Percentage (0-100) for a status; unknown or missing status yields 0."""
    if status not in JOB_STATUS_VALUES:
        return 0.0
    index = JOB_STATUS_ORDER.index(status)
    return (index + 1) / len(JOB_STATUS_ORDER) * 100


def status_label(status: str) -> str:
    """Human-readable label; unknown codes fall back to the raw code."""
    return STATUS_LABELS.get(status, status)


def allowed_client_actions(status: str | None) -> ClientActions:
    """Clients may comment and approve only while the job is ready for review."""
    in_review = status == CLIENT_REVIEW_STATUS
    return ClientActions(can_comment=in_review, can_approve=in_review)


def status_catalog() -> list[JobStatusInfo]:
    """All statuses in lifecycle order with label and progress."""
    return [
        JobStatusInfo(value=s, label=status_label(s), progress=status_progress(s))
        for s in JOB_STATUS_ORDER
    ]
