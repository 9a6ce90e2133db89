"""Health check endpoint with database connectivity check for the SQL backend."""

from fastapi import APIRouter

from photodesk.core.config import settings
from photodesk.core.database import check_db_connected, session_scope
from photodesk.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health() -> HealthResponse:
    """
    Return service health status, storage backend and, for the database backend,
    database connectivity. Used by load balancers and monitoring.
    """
    db_status = None
    if settings.STORAGE_BACKEND == "database":
        with session_scope() as db:
            db_status = "connected" if check_db_connected(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        storage=settings.STORAGE_BACKEND,
        database=db_status,
    )
