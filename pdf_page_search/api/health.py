"""Health check API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global instances
from ..engine_instance import document_store, search_coordinator

# Track application start time
app_start_time = time.time()

PROBE_TEXT = "health probe text"
PROBE_QUERY = "probe"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the search service"
)
def health_check() -> HealthResponse:
    """
    Perform a health check on the search service.

    Runs the match finder against a fixed probe string in both modes.
    """
    try:
        uptime = time.time() - app_start_time

        dependencies = {
            "match_finder": "healthy",
            "document_store": "healthy"
        }

        try:
            finder = search_coordinator.match_finder
            exact = finder.find(PROBE_TEXT, PROBE_QUERY, fuzzy=False)
            fuzzy = finder.find(PROBE_TEXT, PROBE_QUERY, fuzzy=True)
            if not exact or not fuzzy:
                dependencies["match_finder"] = "degraded"
        except Exception:
            dependencies["match_finder"] = "unhealthy"

        try:
            len(document_store)
        except Exception:
            dependencies["document_store"] = "unhealthy"

        if all(status == "healthy" for status in dependencies.values()):
            status = "healthy"
        elif any(status == "unhealthy" for status in dependencies.values()):
            status = "unhealthy"
        else:
            status = "degraded"

        return HealthResponse(
            status=status,
            version=settings.app_version,
            uptime=uptime,
            dependencies=dependencies
        )

    except Exception as e:
        raise HTTPException(
            status_code=500,
            detail=f"Health check failed: {str(e)}"
        )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
def readiness_check() -> JSONResponse:
    """Report readiness along with the number of loaded documents."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "documents_loaded": len(document_store)
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
def liveness_check() -> JSONResponse:
    """Simple liveness check returning the current uptime."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - app_start_time
        }
    )
