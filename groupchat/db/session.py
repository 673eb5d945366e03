import logging
import ssl
from contextlib import asynccontextmanager

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from groupchat.core.config import settings
from groupchat.models import chat_group, group_member, message, user  # noqa: F401
from groupchat.models.base import Base

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str | None = None) -> AsyncEngine:
    url = url or settings.async_database_url
    # credentials stay out of the log
    masked_url = url.split("@")[-1] if "@" in url else url
    logger.info(f"DB ENGINE CONFIG: target={masked_url}, ssl={settings.DATABASE_SSL}")

    if url.startswith("sqlite"):
        sqlite_engine = create_async_engine(url, echo=settings.DB_ECHO)
        event.listen(sqlite_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return sqlite_engine

    connect_args = {}
    if settings.DATABASE_SSL:
        ssl_context = ssl.create_default_context()
        ssl_context.check_hostname = False
        ssl_context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = ssl_context

    return create_async_engine(
        url,
        echo=settings.DB_ECHO,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
        pool_recycle=300,
        connect_args=connect_args,
    )


engine = build_engine()

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_models(bind: AsyncEngine = engine) -> None:
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db():
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def transaction(db: AsyncSession):
    """Commit on clean exit, roll back and re-raise on any error."""
    try:
        yield db
        await db.commit()
    except Exception:
        await db.rollback()
        raise
