"""
Health check endpoints.

- GET /: liveness and version
- GET /health: database connectivity and error statistics
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from typing import Dict, Any
import logging
import time
from datetime import datetime

from darshan_admin.config.settings import get_settings
from darshan_admin.core.db import get_session_factory
from darshan_admin.core.error_handlers import error_handler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/")
async def root() -> Dict[str, Any]:
    """Root endpoint for basic liveness check."""
    settings = get_settings()
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "status": "running"
    }


@router.get("/health")
async def health_check(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> Dict[str, Any]:
    """
    Health check with row store status.

    Returns "healthy" when the database answers, "unhealthy" otherwise.
    """
    settings = get_settings()
    try:
        async with session_factory() as session:
            await session.execute(text("SELECT 1"))
        database = {"status": "healthy", "connection": "ok"}
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Database health check failed: {e}")
        database = {"status": "unhealthy", "error": str(e)}

    return {
        "status": database["status"],
        "version": settings.app_version,
        "environment": settings.environment.value,
        "uptime_seconds": round(time.time() - _app_start_time, 1),
        "timestamp": datetime.utcnow().isoformat(),
        "details": {"database": database},
        "error_statistics": error_handler.get_error_statistics(),
    }
