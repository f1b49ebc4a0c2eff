"""
SQLite database configuration and ORM models.

This module defines the SQLAlchemy ORM model of the scheduler table and the
engine/session helpers used by the repositories.
"""

from functools import lru_cache

from sqlalchemy import Column, Index, Integer, String, Text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from taskplanner.core.config import get_settings
from taskplanner.core.logger import setup_logger

logger = setup_logger(__name__)


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# ===========================================
# ORM Models
# ===========================================


class SchedulerORM(Base):
    """Task row of the scheduler table."""

    __tablename__ = "scheduler"
    __table_args__ = (Index("idx_date", "date"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(String(8), nullable=False)
    title = Column(String(256), nullable=False)
    comment = Column(Text, nullable=True, default="")
    repeat = Column(String(128), nullable=True, default="")


# ===========================================
# Database Session Management
# ===========================================


def get_engine(url: str | None = None) -> AsyncEngine:
    """Get async engine instance."""
    settings = get_settings()
    return create_async_engine(url or settings.database_url, echo=settings.DEBUG)


@lru_cache()
def get_app_engine() -> AsyncEngine:
    """Engine shared by the running application."""
    return get_engine()


def get_session_factory(engine: AsyncEngine | None = None):
    """Get async session factory."""
    return sessionmaker(engine or get_app_engine(), class_=AsyncSession, expire_on_commit=False)


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Create the scheduler table and its date index if they are missing."""
    engine = engine or get_app_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database ready at %s", engine.url)
