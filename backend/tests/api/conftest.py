"""API test fixtures — app built from explicit Settings + httpx client.

Invariants:
    - Each test builds its own app via create_app(); no shared app state
    - app.state.db_manager points at the in-memory test engine, so get_db
      runs unmodified (the lifespan is not started by ASGITransport)
"""

import pytest
from httpx import ASGITransport, AsyncClient

from task_manager.config import Settings
from task_manager.infrastructure.database import DatabaseSessionManager
from task_manager.main import create_app


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        log_format="text",
    )


@pytest.fixture
async def app(test_settings, test_engine, test_session_factory):
    application = create_app(test_settings)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    application.state.db_manager = fake_manager
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
