"""Async Session Factory — binds sessions to an engine created elsewhere.

Invariants:
    - Sessions never expire attributes on commit

Design Decisions:
    - Separate from infrastructure/database.py: no pooling options, no error mapping;
      test fixtures share one in-memory engine through it
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker


def session_factory_for(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Bind a session factory to an existing engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
