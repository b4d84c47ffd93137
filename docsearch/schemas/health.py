"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready."""

    status: str = Field(default="ok", description="Readiness status")
    cache: bool = Field(..., description="True when the Redis cache is connected")
    sources: list[str] = Field(default_factory=list, description="Enabled documentation sources")
