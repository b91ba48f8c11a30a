# shopdb/database.py
import os
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

# DATABASE_URL keeps containerized runs configurable; the default points at the compose Postgres service.
DATABASE_URL = os.environ.get(
    "DATABASE_URL",
    "postgresql+asyncpg://postgres:postgres@db:5432/shop_db",
)
SQL_ECHO = os.environ.get("SQL_ECHO", "").lower() in ("1", "true", "yes")

# Alembic and scripts run synchronously; these async driver suffixes are dropped for them.
ASYNC_DRIVERS = ("+asyncpg", "+aiosqlite")


def to_sync_url(url: str) -> str:
    for driver in ASYNC_DRIVERS:
        if driver in url:
            return url.replace(driver, "")
    return url


def enable_sqlite_foreign_keys(engine) -> None:
    """SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection."""
    sync_engine = engine.sync_engine if isinstance(engine, AsyncEngine) else engine
    if sync_engine.dialect.name != "sqlite":
        return

    @event.listens_for(sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def make_engine(url: str = DATABASE_URL, **kwargs) -> AsyncEngine:
    kwargs.setdefault("echo", SQL_ECHO)
    kwargs.setdefault("future", True)
    new_engine = create_async_engine(url, **kwargs)
    enable_sqlite_foreign_keys(new_engine)
    return new_engine


engine = make_engine()

async_session_maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_maker() as session:
        yield session
