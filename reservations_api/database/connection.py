from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from reservations_api.utils.settings.database import DatabaseSettings


def _enable_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    # SQLite LIKE is case-insensitive by default; keyword search is case-sensitive.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def build_async_engine(url: str, **kwargs) -> AsyncEngine:
    """Create an async engine, applying dialect-specific connection setup."""
    engine = create_async_engine(url, echo=False, **kwargs)
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_pragmas)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


async_engine = build_async_engine(DatabaseSettings().DATABASE_URL_ASYNC)
AsyncSessionLocal = build_session_factory(async_engine)

