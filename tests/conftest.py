"""Test fixtures for the BuurBak availability API."""
from __future__ import annotations

import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from buurbak.core.config import get_settings
from buurbak.core.security import get_password_hash
from buurbak.db.base import Base
from buurbak.db.session import dispose_engine, get_sessionmaker
from buurbak.main import app
from buurbak.models import Trailer, User, UserRole, UserStatus


@pytest.fixture(scope="session")
def db_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """Provide a temporary SQLite database URL for the test session."""
    db_path = tmp_path_factory.mktemp("db") / "test.db"
    return f"sqlite+aiosqlite:///{db_path}"


@pytest_asyncio.fixture()
async def reset_database(db_url: str) -> AsyncIterator[None]:
    """Drop and recreate the database schema for an isolated test."""
    os.environ["DATABASE_URL"] = db_url
    get_settings.cache_clear()
    get_settings()

    await dispose_engine(db_url)
    engine = create_async_engine(db_url)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.drop_all)
        await connection.run_sync(Base.metadata.create_all)
    await engine.dispose()
    yield
    await dispose_engine(db_url)


@pytest_asyncio.fixture()
async def app_context(
    reset_database: None, db_url: str
) -> AsyncIterator[dict[str, object]]:
    """Yield an async client plus a lessor, a second lessor, a renter and a trailer."""
    sessionmaker = get_sessionmaker(db_url)
    password = "Passw0rd!"

    async with sessionmaker() as session:
        lessor = User(
            email="lotte@example.com",
            hashed_password=get_password_hash(password),
            first_name="Lotte",
            last_name="Verhuur",
            role=UserRole.LESSOR,
            status=UserStatus.ACTIVE,
        )
        other_lessor = User(
            email="bram@example.com",
            hashed_password=get_password_hash(password),
            first_name="Bram",
            last_name="Buur",
            role=UserRole.LESSOR,
            status=UserStatus.ACTIVE,
        )
        renter = User(
            email="renter@example.com",
            hashed_password=get_password_hash(password),
            first_name="Ruben",
            last_name="Huurder",
            role=UserRole.USER,
            status=UserStatus.ACTIVE,
        )
        session.add_all([lessor, other_lessor, renter])
        await session.flush()

        trailer = Trailer(owner_id=lessor.id, title="Bakwagen 250x130")
        other_trailer = Trailer(owner_id=other_lessor.id, title="Paardentrailer")
        session.add_all([trailer, other_trailer])
        await session.commit()

        context: dict[str, object] = {
            "password": password,
            "lessor_id": lessor.id,
            "lessor_email": lessor.email,
            "other_lessor_id": other_lessor.id,
            "other_lessor_email": other_lessor.email,
            "renter_id": renter.id,
            "renter_email": renter.email,
            "trailer_id": trailer.id,
            "other_trailer_id": other_trailer.id,
        }

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        context["client"] = client
        yield context
