"""Async engine / session factory. The engine is owned by the app lifespan, not by this module."""
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from resume_learning.core.config import Settings

Base = declarative_base()


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the store engine; every connection wait is bounded by the store timeout."""
    timeout = settings.store_timeout_seconds
    url = settings.database_url

    if url.startswith("sqlite"):
        # busy timeout for concurrent writers
        return create_async_engine(
            url,
            echo=settings.debug,
            connect_args={"timeout": timeout},
        )

    connect_args = {}
    if url.startswith("postgresql+asyncpg"):
        connect_args = {"timeout": timeout, "command_timeout": timeout}
    return create_async_engine(
        url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_timeout=timeout,
        pool_recycle=3600,
        connect_args=connect_args,
    )


def make_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def ping(engine: AsyncEngine) -> None:
    """Round-trip to the store; raises if it is unreachable."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """Dependency: one session per request from the app-scoped session factory."""
    async with request.app.state.sessionmaker() as session:
        yield session


def sync_database_url(url: str) -> str:
    """Same store, sync driver (for Alembic)."""
    if url.startswith("postgresql+asyncpg://"):
        return url.replace("postgresql+asyncpg://", "postgresql+psycopg2://", 1)
    if url.startswith("sqlite+aiosqlite://"):
        return url.replace("sqlite+aiosqlite://", "sqlite://", 1)
    return url
