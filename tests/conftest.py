"""
Test configuration and fixtures.
Uses an in-memory SQLite database shared through a static connection pool.
"""
import os

# Set test environment before any imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["IMAGE_PROVIDER"] = "placeholder"
os.environ["SIGNUP_CREDITS"] = "3"

import pytest
from typing import AsyncGenerator, List

from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from imagegen.ai.base import ImageProvider
from imagegen.auth.security import create_access_token, hash_password
from imagegen.models.base import Base
from imagegen.models.user import User


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "correct-horse-battery"


class FakeImageProvider(ImageProvider):
    """Records prompts; returns a fixed URL or fails on demand."""

    name = "fake"

    def __init__(self, url: str = "https://images.example.com/generated.png"):
        self.url = url
        self.calls: List[str] = []
        self.error: Exception = None
        self.on_call = None

    def is_configured(self) -> bool:
        return True

    async def generate_image(self, prompt: str) -> str:
        self.calls.append(prompt)
        if self.on_call is not None:
            await self.on_call()
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create database session for testing."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with session_maker() as session:
        yield session

    await engine.dispose()


async def _make_user(db_session: AsyncSession, email: str, credits: int) -> User:
    user = User(
        email=email,
        password_hash=hash_password(TEST_PASSWORD),
        credits=credits
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture(scope="function")
async def test_user(db_session: AsyncSession) -> User:
    """Create a test user."""
    return await _make_user(db_session, "test@example.com", credits=10)


@pytest.fixture(scope="function")
async def test_user_no_credits(db_session: AsyncSession) -> User:
    """Create a test user with no credits."""
    return await _make_user(db_session, "nocredits@example.com", credits=0)


@pytest.fixture
def fake_provider() -> FakeImageProvider:
    return FakeImageProvider()


@pytest.fixture(scope="function")
def app(db_session: AsyncSession, fake_provider: FakeImageProvider) -> FastAPI:
    """FastAPI app with database and provider dependencies overridden."""
    from imagegen.main import app
    from imagegen.database import get_db
    from imagegen.ai.factory import get_image_provider

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_image_provider] = lambda: fake_provider

    yield app

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client without credentials."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(user: User) -> dict:
    """Authorization header for a user."""
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}

