import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase

from worktime.core.config import settings
from worktime.core.errors import StoreUnavailable

logger = logging.getLogger(__name__)

# SQLite benötigt check_same_thread=False
connect_args = {}
if "sqlite" in settings.DATABASE_URL:
    connect_args = {"check_same_thread": False}

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    connect_args=connect_args,
)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    pass


async def get_db():
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


@contextmanager
def store_errors(operation: str):
    """Übersetzt jeden Treiber-/ORM-Fehler in StoreUnavailable. Keine Wiederholung."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("Store operation %s failed: %s", operation, e, exc_info=True)
        raise StoreUnavailable() from e


async def create_tables():
    """Erstellt alle Tabellen (für lokale Entwicklung ohne Alembic)."""
    import worktime.models  # noqa – alle Models registrieren
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
