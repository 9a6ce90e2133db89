"""API routes."""

from fastapi import APIRouter

from photodesk.api.routes import (
    auth,
    client_portal,
    clients,
    equipment,
    equipment_presets,
    events,
    health,
    job_statuses,
    photo_jobs,
    teams,
)

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(clients.router, prefix="/clients", tags=["clients"])
router.include_router(equipment.router, prefix="/equipment", tags=["equipment"])
router.include_router(
    equipment_presets.router, prefix="/equipment-presets", tags=["equipment"]
)
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(job_statuses.router, prefix="/job-statuses", tags=["photo-jobs"])
router.include_router(photo_jobs.router, prefix="/photo-jobs", tags=["photo-jobs"])
router.include_router(client_portal.router, prefix="/client-portal", tags=["client-portal"])
