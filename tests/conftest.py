"""Shared test fixtures for the Planner API."""

import os

# Settings are read at import time, so the environment has to be ready first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")
os.environ.setdefault("API_BASE_URL", "http://api.test")
os.environ.setdefault("WEB_BASE_URL", "http://web.test")

from datetime import datetime, timedelta, timezone

import pytest
from fakeredis import FakeAsyncRedis
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import planner.models  # noqa: F401
from planner.core.cache import RedisCache
from planner.core.database import Base, get_db
from planner.core.mail import MailClient, MailDeliveryError, get_mail_client
from planner.core.redis_lifecycle import get_cache
from planner.main import app


class RecordingMailClient(MailClient):
    """Mail client that keeps messages in memory instead of talking SMTP."""

    def __init__(self):
        super().__init__(host="localhost", port=0, sender_name="Planner Team", sender_address="hello@planner.test")
        self.sent = []
        self.failing = set()

    def send_mail(self, to_email, subject, html, to_name=None):
        if to_email in self.failing:
            raise MailDeliveryError(to_email, "mailbox unavailable")
        self.sent.append({"to": to_email, "to_name": to_name, "subject": subject, "html": html})
        return f"<{len(self.sent)}@planner.test>"

    def recipients(self):
        return sorted(message["to"] for message in self.sent)


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def cache():
    client = FakeAsyncRedis(decode_responses=True)
    yield RedisCache(client)
    await client.flushall()


@pytest.fixture
def mail():
    return RecordingMailClient()


@pytest.fixture
async def client(session_factory, cache, mail):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def override_get_cache():
        yield cache

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = override_get_cache
    app.dependency_overrides[get_mail_client] = lambda: mail

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def trip_dates():
    starts_at = datetime.now(timezone.utc) + timedelta(days=10)
    return starts_at, starts_at + timedelta(days=5)


@pytest.fixture
def trip_payload(trip_dates):
    starts_at, ends_at = trip_dates
    return {
        "destination": "Rio de Janeiro",
        "starts_at": starts_at.isoformat(),
        "ends_at": ends_at.isoformat(),
        "owner_name": "Ana",
        "owner_email": "ana@example.com",
        "emails_to_invite": ["bob@example.com"],
    }
