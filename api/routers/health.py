"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

SERVICE_NAME = "exercise-tracker-api"

router = APIRouter(
    tags=["Health"],
)


# =============================================================================
# Health Check Endpoints
# =============================================================================


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Does not touch the store, so it answers even when the database is down.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok", "service": SERVICE_NAME}
