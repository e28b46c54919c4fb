"""Health Checks — liveness of the process, readiness of the task store.

Invariants:
    - GET /api/v1/health/ is 200 whenever the app can answer; name and version
      come from the FastAPI app itself
    - GET /api/v1/health/ready is 200 only when the tasks table can be read
      through this app's session manager, otherwise 503
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness(request: Request):
    """503 until the lifespan has a session manager and the tasks table answers."""
    db_manager = getattr(request.app.state, "db_manager", None)
    if db_manager is None:
        reason = "database_not_initialized"
    elif not await db_manager.health_check():
        reason = "task_store_unavailable"
    else:
        return {"status": "ready", "checks": {"task_store": "ok"}}

    logger.warning(f"Readiness check failed: {reason}", extra={"path": request.url.path})
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
