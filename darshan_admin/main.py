"""
FastAPI application for the Darshan admin dashboard.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from darshan_admin.api import (
    activity_router,
    dashboard_router,
    destinations_router,
    events_router,
    health_router,
)
from darshan_admin.config.settings import Settings, get_settings
from darshan_admin.core.db import dispose_engine
from darshan_admin.core.error_handlers import setup_error_handlers
from darshan_admin.core.logging import configure_logging
from darshan_admin.middleware import RequestContextMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{app.title} v{app.version} starting")
    try:
        yield
    finally:
        await dispose_engine()
        logger.info(f"{app.title} stopped, database connections closed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application: logging, middleware, error handlers and routers.

    Args:
        settings: Settings to use instead of the process-wide instance
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level.value, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.add_middleware(CORSMiddleware, **settings.cors_kwargs())
    app.add_middleware(RequestContextMiddleware)
    setup_error_handlers(app)

    for router in (
        health_router,
        dashboard_router,
        destinations_router,
        events_router,
        activity_router,
    ):
        app.include_router(router)

    return app


app = create_app()
