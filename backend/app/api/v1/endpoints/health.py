"""
Health check endpoints

- /health       - liveness (app is running)
- /health/ready - store is attached and answering
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from datetime import datetime
from typing import Dict, Any

from app.core.config import settings
from app.core.logging_config import logger


router = APIRouter(prefix="/health", tags=["Health Checks"])


def check_storage(request: Request) -> Dict[str, Any]:
    """Check that the in-memory store is attached to the app"""
    storage = getattr(request.app.state, "storage", None)
    if storage is None:
        logger.error("[HealthCheck] Storage not initialised")
        return {"status": "unhealthy", "message": "Storage not initialised"}
    return {"status": "healthy", "records": storage.counts()}


@router.get("")
async def liveness():
    return {
        "status": "healthy",
        "service": "studyflow-backend",
        "version": settings.APP_VERSION,
        "timestamp": datetime.now().isoformat(),
    }


@router.get("/ready")
async def readiness(request: Request):
    storage = check_storage(request)
    healthy = storage["status"] == "healthy"
    return JSONResponse(
        status_code=200 if healthy else 503,
        content={
            "status": "ready" if healthy else "not_ready",
            "checks": {"storage": storage},
        },
    )
