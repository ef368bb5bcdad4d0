"""
Pytest Configuration and Shared Fixtures
"""

import os
import tempfile

# Settings are read once at import time, so point them at scratch locations first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///" + os.path.join(tempfile.mkdtemp(), "unused.db"))
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp())
os.environ.setdefault("OPENAI_API_KEY", "test-key")

import pytest
from unittest.mock import AsyncMock
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.database import Base, get_db
from app.main import app
from app.services.chat.models import MaterialData
from app.services.chat.pipeline import ChatPipeline, get_chat_pipeline


# ============================================
# Database Fixtures
# ============================================

@pytest.fixture
async def engine(tmp_path):
    """A fresh SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# ============================================
# Model Provider Fixtures
# ============================================

@pytest.fixture
def provider():
    """Stand-in LLM provider; set ``provider.chat.side_effect`` to script replies."""
    mock = AsyncMock()
    mock.provider_name = "fake"
    return mock


@pytest.fixture
def pipeline(provider):
    return ChatPipeline(provider_factory=lambda model_id: (provider, model_id))


# ============================================
# Data Fixtures
# ============================================

@pytest.fixture
def lab_materials():
    return [
        MaterialData(id=1, title="lab1", content="A", type="text/plain"),
        MaterialData(id=2, title="lab2", content="B", type="text/plain"),
    ]


# ============================================
# API Client
# ============================================

@pytest.fixture
async def client(session_factory, pipeline):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_chat_pipeline] = lambda: pipeline

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
