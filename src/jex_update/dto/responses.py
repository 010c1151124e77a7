"""Response DTOs for JSON endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    catalog_size: int = Field(..., description="Number of configured extensions", ge=0)
    cache_dir: str = Field(..., description="Directory holding rendered documents")
    cache_writable: bool = Field(..., description="Whether the cache directory accepts writes")
