"""API routes implementation."""

from fastapi import APIRouter, Request
from datetime import datetime, timezone

from .schemas import HealthResponse

router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is up and report how many short URLs it holds.",
)
def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    store = request.app.state.store

    return HealthResponse(
        status="healthy",
        urls=len(store),
        timestamp=datetime.now(timezone.utc),
    )
