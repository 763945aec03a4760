"""API response models."""

from pydantic import BaseModel, Field
from typing import Optional, Literal


class FormStateResponse(BaseModel):
    """Derived field map, error map and submission gate for the rendering layer."""

    fields: dict[str, Optional[float]]
    errors: dict[str, Optional[str]] = {}
    submittable: bool = False
    missing_field: Optional[str] = None


class PredictionResponse(BaseModel):
    """Predicted UCS for a submitted form."""

    ucs: float
    unit: str = "MPa"
    display: str = Field(description="Ready-to-render result line")


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "unhealthy", "degraded"]
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    dependencies: dict[str, HealthDependency]
