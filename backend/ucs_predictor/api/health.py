"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from ucs_predictor.models.responses import HealthResponse, HealthDependency

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Service health with prediction backend configuration status."""
    dependencies = {}

    client = getattr(request.app.state, "prediction_client", None)
    if client is None:
        dependencies["prediction_backend"] = HealthDependency(
            status="unhealthy", message="Prediction client not initialised"
        )
    elif not client.url:
        dependencies["prediction_backend"] = HealthDependency(
            status="degraded", message="PREDICTION_URL is not configured"
        )
    else:
        dependencies["prediction_backend"] = HealthDependency(status="healthy", message=client.url)

    if all(d.status == "healthy" for d in dependencies.values()):
        status = "healthy"
    elif any(d.status == "unhealthy" for d in dependencies.values()):
        status = "unhealthy"
    else:
        status = "degraded"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
