"""Health check endpoint — database reachability and geocoding setup."""

from urllib.parse import urlsplit

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from addressable.adapters.persistence.database import get_session
from addressable.config import settings

router = APIRouter(tags=["health"])


async def _database_status(session: AsyncSession) -> str:
    try:
        await session.scalar(text("SELECT 1"))
    except Exception as e:
        return f"error: {e}"
    return "connected"


@router.get("/health")
async def health_check(session: AsyncSession = Depends(get_session)):
    """Report DB connectivity and which geocoding host is configured.

    The geocoder itself is not called, so health checks spend no provider quota.
    """
    db_status = await _database_status(session)
    return {
        "status": "ok" if db_status == "connected" else "degraded",
        "database": db_status,
        "geocoding_host": urlsplit(settings.geocoding_base_url).netloc,
        "geocoding_timeout": settings.geocoding_timeout,
    }
