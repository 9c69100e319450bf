"""System router: health check."""

from fastapi import APIRouter

system_router = APIRouter(tags=["System"])


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}
