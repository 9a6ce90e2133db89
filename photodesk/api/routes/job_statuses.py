"""Photo-job status catalog (labels and progress) for clients rendering the lifecycle."""

from fastapi import APIRouter

from photodesk.schemas.job_status import JobStatusInfo
from photodesk.services.job_status import status_catalog

router = APIRouter()


@router.get("", response_model=list[JobStatusInfo])
def list_job_statuses() -> list[JobStatusInfo]:
    return status_catalog()
