"""Health & Readiness Probes.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the catalog snapshot cannot be loaded
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from b2b_gate.config import get_settings
from b2b_gate.core.errors import B2BGateError
from b2b_gate.infrastructure.snapshot import load_snapshot

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "healthy", "service": "b2b-gate"}


@router.get("/ready")
async def readiness_check():
    """Readiness probe: the catalog snapshot must load and validate."""
    try:
        load_snapshot(get_settings().snapshot_path)
    except B2BGateError as e:
        logger.warning(
            f"Readiness check failed: {e.message}",
            extra={"error_code": e.code},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": e.code.lower()},
        )
    return {"status": "ready", "checks": {"snapshot": "healthy"}}
