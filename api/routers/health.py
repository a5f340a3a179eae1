"""
Health check endpoint.

The service has no database or cache to ping, so being able to answer
at all is the whole check. Hosting platforms use it as a readiness probe.
"""

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """Report that the app is up."""
    return {"status": "healthy"}
