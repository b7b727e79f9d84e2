"""
Gemeinsame pytest-Fixtures für die Worktime-Backend-Tests.

SQLite in-memory mit StaticPool: alle Sessions teilen sich eine Verbindung,
in einer Session geschriebene Daten sind in anderen sichtbar (wichtig für HTTP-Client-Tests).
Die Zeit ist per FixedClock festgesetzt; Tests verschieben sie über clock.instant.
"""
from datetime import date, datetime
from zoneinfo import ZoneInfo

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

import worktime.models  # noqa – registriert alle SQLAlchemy-Models in Base.metadata
from worktime.api.deps import get_clock
from worktime.core.clock import FixedClock
from worktime.core.database import Base, get_db
from worktime.core.security import hash_password, create_access_token
from worktime.main import app
from worktime.models.employee import Employee

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

BERLIN = ZoneInfo("Europe/Berlin")

# Mittwochnachmittag, klar innerhalb der Kernarbeitszeit
WEDNESDAY_2PM = datetime(2026, 10, 14, 14, 0, tzinfo=BERLIN)


def local(year, month, day, hour, minute=0) -> datetime:
    return datetime(year, month, day, hour, minute, tzinfo=BERLIN)


# ── Clock ────────────────────────────────────────────────────────────────────

@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(WEDNESDAY_2PM, tz=BERLIN)


# ── Gemeinsame Engine (function-scoped: frische DB pro Test) ─────────────────

@pytest_asyncio.fixture
async def engine():
    """Erstellt pro Test eine frische In-Memory-SQLite-Engine mit gemeinsamem Connection-Pool."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,          # eine gemeinsame Verbindung → alle Sessions sehen dieselben Daten
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine) -> AsyncSession:
    """Async-DB-Session zur direkten Datenprüfung in Tests."""
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# ── HTTP-Client-Fixture ───────────────────────────────────────────────────────

@pytest_asyncio.fixture
async def client(engine, clock) -> AsyncClient:
    """
    FastAPI-Testclient mit überschriebenem get_db und get_clock.
    Jeder Request bekommt eine eigene Session, teilt aber über
    StaticPool dieselbe Verbindung.
    """
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_clock] = lambda: clock

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


# ── Mitarbeiter-Fixtures ──────────────────────────────────────────────────────

async def _add_employee(db, email: str, birth_date: date | None) -> Employee:
    e = Employee(
        email=email,
        hashed_password=hash_password("testpass123"),
        full_name="Test Employee",
        birth_date=birth_date,
        is_active=True,
    )
    db.add(e)
    await db.commit()
    await db.refresh(e)
    return e


@pytest_asyncio.fixture
async def adult(db) -> Employee:
    return await _add_employee(db, "adult@test.de", date(1990, 1, 1))


@pytest_asyncio.fixture
async def minor(db) -> Employee:
    # am WEDNESDAY_2PM 17 Jahre alt
    return await _add_employee(db, "minor@test.de", date(2009, 3, 1))


@pytest.fixture
def adult_token(adult) -> str:
    return create_access_token(adult.email)


@pytest.fixture
def minor_token(minor) -> str:
    return create_access_token(minor.email)


# ── Hilfsfunktionen ────────────────────────────────────────────────────────────────────

def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def parse_instant(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
