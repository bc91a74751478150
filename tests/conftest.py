"""Global test configuration and fixtures for the Reservations API."""

import os

# The app module builds its engine at import time; keep it off Postgres in tests.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "TEST")

from collections.abc import AsyncGenerator
from typing import Callable

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from reservations_api.database.connection import (
    build_async_engine,
    build_session_factory,
)
from reservations_api.database.models import Base, Calendar, Organization, User
from reservations_api.modules.organization.roles import RoleService
from reservations_api.modules.user.tokens import create_access_token

from tests.factories import (
    CalendarFactory,
    OrganizationFactory,
    OrganizationMembershipFactory,
    ReservationFactory,
    UserFactory,
)

TEST_BASE_URL = "http://test-reservations-api"


@pytest.fixture
def user_factory():
    return UserFactory


@pytest.fixture
def organization_factory():
    return OrganizationFactory


@pytest.fixture
def membership_factory():
    return OrganizationMembershipFactory


@pytest.fixture
def calendar_factory():
    return CalendarFactory


@pytest.fixture
def reservation_factory():
    return ReservationFactory


@pytest_asyncio.fixture
async def async_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database per test; StaticPool keeps it on one connection."""
    engine = build_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(async_engine)


@pytest_asyncio.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Session used by tests to arrange and inspect data."""
    async with session_factory() as session:
        await RoleService(session).ensure_default_roles()
        yield session


@pytest_asyncio.fixture
async def app(session_factory: async_sessionmaker[AsyncSession]):
    """Create FastAPI application with lifespan manager for testing."""
    from reservations_api.main import app

    async with LifespanManager(app):
        # Lifespan installs the production factory; point requests at the test database
        app.state.session_factory = session_factory
        yield app


# Test Data Fixtures
@pytest_asyncio.fixture
async def test_user(db_session: AsyncSession, user_factory) -> User:
    """Create a test user with a known password."""
    return await user_factory.create_async(
        db_session, user_name="test-user", name="Test User"
    )


@pytest_asyncio.fixture
async def test_organization(
    db_session: AsyncSession, organization_factory, test_user: User
) -> Organization:
    return await organization_factory.create_async(
        db_session, name="Test Organization", created_by=test_user.id
    )


@pytest_asyncio.fixture
async def test_calendar(
    db_session: AsyncSession,
    calendar_factory,
    test_organization: Organization,
    test_user: User,
) -> Calendar:
    return await calendar_factory.create_async(
        db_session,
        name="Meeting Room",
        organization_id=test_organization.id,
        created_by=test_user.id,
    )


# JWT Token Fixtures
@pytest.fixture()
def jwt_token_factory() -> Callable[[str], str]:
    """Factory for creating JWT tokens for test users."""

    def create_token(user_id: str) -> str:
        token, _ = create_access_token(user_id)
        return token

    return create_token


@pytest_asyncio.fixture
async def user_token(test_user: User, jwt_token_factory: Callable[[str], str]) -> str:
    return jwt_token_factory(test_user.id)


# HTTP Client Fixtures
@pytest_asyncio.fixture
async def public_client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client for testing public endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def authorized_client(
    app: FastAPI, user_token: str
) -> AsyncGenerator[AsyncClient, None]:
    """Create HTTP client with JWT authorization headers."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url=TEST_BASE_URL,
        headers={"Authorization": f"Bearer {user_token}"},
    ) as ac:
        yield ac


@pytest.fixture
def client_factory(app: FastAPI, jwt_token_factory):
    """Factory for creating HTTP clients with different user contexts."""

    def create_client_for_user(user: User) -> AsyncClient:
        token = jwt_token_factory(user.id)
        return AsyncClient(
            transport=ASGITransport(app=app),
            base_url=TEST_BASE_URL,
            headers={"Authorization": f"Bearer {token}"},
        )

    return create_client_for_user
