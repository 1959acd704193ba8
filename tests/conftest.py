"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory database sessions, settings, service mocks, seeded records
Dependencies: pytest, sqlalchemy, aiosqlite, fastapi
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock
import uuid

import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from franchise_site.application.services.audit_service import AuditService, RequestMeta
from franchise_site.application.services.auth_service import hash_password
from franchise_site.boundary.db.base import Base
from franchise_site.boundary.db.CRUD import agent_crud, franchise_crud, industry_crud, tag_crud, user_crud
from franchise_site.boundary.db.models.franchise_model import FranchiseStatus
from franchise_site.configs import Settings
from franchise_site.configs.site import AuthSettings, SiteSettings

import franchise_site.boundary.db.models  # noqa: F401

TEST_PASSWORD = "correct-horse-battery"


@pytest.fixture
async def test_engine():
    """
    In-memory SQLite engine shared by every session of a test.

    pysqlite's own transaction handling breaks SAVEPOINT, so the driver is put
    in autocommit mode and SQLAlchemy emits BEGIN itself.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _disable_driver_transactions(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn):
        conn.exec_driver_sql("BEGIN")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_async_db(test_engine):
    """
    Create in-memory SQLite async database session for testing.

    Yields:
        AsyncSession: Test database session, rolled back after the test
    """
    session_factory = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def test_password() -> str:
    return TEST_PASSWORD


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a fixed secret and an internal admin domain."""
    return AuthSettings(
        secret_key="test-secret-key-for-signing-tokens",
        cookie_secure=False,
        internal_admin_domains=["futurefranchiseowners.com"],
        preview_secret="preview-secret",
    )


@pytest.fixture
def test_settings(auth_settings: AuthSettings) -> Settings:
    """Application settings isolated from the developer's environment."""
    return Settings(
        auth=auth_settings,
        site=SiteSettings(base_url="https://example.com/"),
    )


@pytest.fixture
def audit(test_async_db: AsyncSession) -> AuditService:
    """Audit recorder without an acting user."""
    return AuditService(test_async_db, RequestMeta(ip_address="127.0.0.1", user_agent="pytest"))


@pytest.fixture
async def admin_user(test_async_db: AsyncSession):
    """Internal admin (matches the configured internal domain)."""
    return await user_crud.create(
        test_async_db,
        email="admin@futurefranchiseowners.com",
        name="Site Admin",
        password_hash=hash_password(TEST_PASSWORD),
    )


@pytest.fixture
async def editor_user(test_async_db: AsyncSession):
    """Regular admin user that is not an internal admin."""
    return await user_crud.create(
        test_async_db,
        email="editor@agency.com",
        name="Editor",
        password_hash=hash_password(TEST_PASSWORD),
    )


@pytest.fixture
async def industry(test_async_db: AsyncSession):
    return await industry_crud.create(test_async_db, name="Fitness", slug="fitness")


@pytest.fixture
async def tag(test_async_db: AsyncSession):
    return await tag_crud.create(test_async_db, name="Best Score 90", slug="best-score-90")


@pytest.fixture
async def agent(test_async_db: AsyncSession):
    return await agent_crud.create(
        test_async_db,
        name="Alice Agent",
        email="alice@example.com",
        title="Senior Consultant",
        ghl_webhook="https://hooks.example.com/alice",
    )


@pytest.fixture
async def published_franchise(test_async_db: AsyncSession, industry, tag, agent):
    """Published franchise routed to ``agent``."""
    return await franchise_crud.create(
        test_async_db,
        business_name="Iron Gym",
        description="<p>Strength <b>training</b> studios</p>",
        industry_id=industry.id,
        tags=[tag],
        investment_min=50000,
        investment_max=90000,
        assigned_agent_id=agent.id,
        status=FranchiseStatus.PUBLISHED,
        is_featured=True,
    )


@pytest.fixture
async def draft_franchise(test_async_db: AsyncSession, industry):
    return await franchise_crud.create(
        test_async_db,
        business_name="Yoga Nook",
        description="Calm yoga studios",
        industry_id=industry.id,
        investment_min=20000,
        investment_max=40000,
    )


@pytest.fixture
def mock_mailer():
    """Email client that accepts every message."""
    mailer = AsyncMock()
    mailer.send = AsyncMock(return_value="email-id")
    return mailer


@pytest.fixture
def mock_verifier():
    """Captcha verifier that passes every token."""
    verifier = MagicMock()
    verifier.enabled = True
    verifier.verify = AsyncMock(return_value=True)
    return verifier


@pytest.fixture
def mock_webhooks():
    webhooks = AsyncMock()
    webhooks.post_lead = AsyncMock(return_value=True)
    return webhooks


@pytest.fixture
def record_id():
    """Generate a test record ID."""
    return uuid.uuid4()
