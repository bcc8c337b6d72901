from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from typing import Optional

from darshan_admin.config.settings import get_settings

# SQLAlchemy declarative base for models
Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def create_engine_from_url(url: str, echo: bool = False, pool_pre_ping: bool = True) -> AsyncEngine:
    return create_async_engine(url, echo=echo, pool_pre_ping=pool_pre_ping, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        bind=engine, autoflush=False, expire_on_commit=False, class_=AsyncSession
    )


def get_engine() -> AsyncEngine:
    """Engine for the configured database, created on first use."""
    global _engine
    if _engine is None:
        db_settings = get_settings().database
        _engine = create_engine_from_url(
            db_settings.url,
            echo=db_settings.echo,
            pool_pre_ping=db_settings.pool_pre_ping,
        )
    return _engine


def get_session_factory() -> async_sessionmaker:
    """FastAPI dependency returning the shared session factory."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def dispose_engine() -> None:
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
