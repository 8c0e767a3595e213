"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if database is unreachable (readiness)
    - Readiness reports the applied Alembic revision and whether it is the
      revision this build expects; a mismatch is reported, not fatal

Design Decisions:
    - db_manager read through the module at call time: it is assigned on startup
    - Expected revision pinned in code next to the migration it names, so a
      deploy that skipped `alembic upgrade head` shows up on readiness
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from activity_notes.infrastructure import database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

SERVICE_NAME = "activity-notes-api"
SERVICE_VERSION = "1.0.0"
EXPECTED_SCHEMA_REVISION = "001_initial"


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe: database connectivity plus schema revision."""
    manager = database.db_manager
    if not manager or not await manager.health_check():
        logger.warning("Readiness check failed: database unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )

    revision = await manager.schema_revision()
    if revision != EXPECTED_SCHEMA_REVISION:
        logger.warning(
            f"Schema revision {revision!r}, expected {EXPECTED_SCHEMA_REVISION!r}",
        )
    return {
        "status": "ready",
        "checks": {
            "database": "healthy",
            "schema_revision": revision,
            "schema_current": revision == EXPECTED_SCHEMA_REVISION,
        },
    }
