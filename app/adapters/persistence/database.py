"""Async engine, session factory and declarative base."""

from __future__ import annotations

from collections.abc import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings, settings


class Base(DeclarativeBase):
    pass


def build_engine(cfg: Settings) -> AsyncEngine:
    return create_async_engine(cfg.database_url, echo=cfg.debug, pool_pre_ping=True)


engine = build_engine(settings)
async_session_factory = async_sessionmaker(engine, expire_on_commit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    async with async_session_factory() as session:
        yield session
