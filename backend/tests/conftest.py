"""
Pytest configuration and fixtures for testing.
"""
import os

# Keep the app's module-level engine off disk and the API key unset while testing
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("OPENAI_API_KEY", "")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.database import Base, get_db  # noqa: E402
from app.api.dependencies.services import get_remix_service  # noqa: E402
from app.main import app  # noqa: E402
from app.models import SavedTweet  # noqa: E402,F401
from app.services.ai_provider import AIResponse  # noqa: E402
from app.services.remix_service import RemixService  # noqa: E402


class EchoCompletionService:
    """Completion service fake that returns the prompt it was given."""

    def __init__(self):
        self.calls = []

    def generate(self, prompt: str, max_tokens: int) -> AIResponse:
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens})
        return AIResponse(content=prompt, model="echo", tokens_used=0)


@pytest.fixture
def test_settings():
    """Settings with a usable API key, isolated from the environment."""
    return Settings(OPENAI_API_KEY="sk-test-key-123", ENVIRONMENT="development")


@pytest.fixture
def echo_provider():
    return EchoCompletionService()


@pytest_asyncio.fixture
async def db_session():
    """Fresh in-memory database and session for each test."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with TestingSessionLocal() as session:
        yield session

    await engine.dispose()


@pytest.fixture
def db_url(tmp_path):
    """File-backed test database with tables created."""
    path = tmp_path / "test_tweets.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(bind=sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def client(db_url, echo_provider, test_settings):
    """Create a test client with database and completion service overrides."""
    # NullPool: each request opens its connection on the TestClient's own loop
    engine = create_async_engine(db_url, poolclass=NullPool)
    TestingSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with TestingSessionLocal() as session:
            yield session

    def override_get_remix_service():
        return RemixService(provider=echo_provider, config=test_settings)

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_remix_service] = override_get_remix_service

    yield TestClient(app)

    app.dependency_overrides.clear()
