"""Health check routes."""

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter(prefix="/api", tags=["health"])

ENDPOINTS = {
    "auth": ["/api/auth/register", "/api/auth/login", "/api/auth/me"],
    "issues": ["/api/issues", "/api/issues/my", "/api/issues/:id"],
    "voting": ["/api/issues/:id/vote"],
    "analytics": ["/api/analytics"],
}


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    message: str
    timestamp: datetime
    endpoints: dict[str, list[str]]


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status and a directory of the API's endpoints
    """
    return HealthResponse(
        status="OK",
        message="CivicSync API is running",
        timestamp=datetime.now(timezone.utc),
        endpoints=ENDPOINTS,
    )
