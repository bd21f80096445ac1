"""Health Routes — liveness and readiness of the invoicing service.

Invariants:
    - GET /health/ answers 200 whenever the process serves requests
    - GET /health/ready answers 503 unless every dependency check passes
    - Check results are reported by name; a missing session manager counts as down
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

import invoicing.infrastructure.database as database
from invoicing.config import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


async def _database_ok() -> bool:
    manager = database.db_manager
    return manager is not None and await manager.health_check()


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(settings: Settings = Depends(get_settings)):
    """Liveness: service identity only, touches nothing."""
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness: the datastore every invoice mutation depends on."""
    checks = {"database": "healthy" if await _database_ok() else "unavailable"}
    if all(result == "healthy" for result in checks.values()):
        return {"status": "ready", "checks": checks}
    logger.warning("Readiness check failed", extra={"operation": "ready"})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "checks": checks},
    )
