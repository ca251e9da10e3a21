"""Health & Readiness Probes — ping and database readiness.

Invariants:
    - GET /ping always returns {"message": "pong"} if the process is up (liveness)
    - GET /health/ready returns 503 if the database is unreachable (readiness)
"""

import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from people_api.infrastructure.database import (
    DatabaseSessionManager, get_db_manager,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/ping", status_code=status.HTTP_200_OK)
async def ping():
    """Basic liveness probe."""
    return {"message": "pong"}


@router.get("/health/ready")
async def readiness_check(
    db_manager: DatabaseSessionManager = Depends(get_db_manager),
):
    """Readiness probe — includes database connectivity."""
    if not await db_manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "database_unavailable",
            },
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
