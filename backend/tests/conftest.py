"""
StudyFlow - Test Configuration and Fixtures
"""
import os
from datetime import datetime, timedelta
from typing import AsyncGenerator, Callable
import pytest
from httpx import AsyncClient, ASGITransport
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['SEED_SAMPLE_DATA'] = 'true'
os.environ['LOG_FILE'] = ''

from app.main import app
from app.modules.auth.dependencies import get_storage
from app.services.memory_storage import MemStorage
from app.models import Task

fake = Faker()


@pytest.fixture
def storage() -> MemStorage:
    """Fresh seeded store for each test (user 1 plus three courses)"""
    return MemStorage(seed=True)


@pytest.fixture
def empty_storage() -> MemStorage:
    return MemStorage()


@pytest.fixture
async def client(storage: MemStorage) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with storage override"""
    app.dependency_overrides[get_storage] = lambda: storage
    app.state.storage = storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build detached Task records for pure view tests"""
    counter = {"id": 0}

    def _make(**overrides) -> Task:
        counter["id"] += 1
        data = {
            "id": counter["id"],
            "user_id": 1,
            "title": fake.sentence(nb_words=4),
            "description": None,
            "course_id": None,
            "due_date": None,
            "created_at": datetime(2026, 10, 1, 9, 0),
        }
        data.update(overrides)
        return Task(**data)

    return _make


class FakeClock:
    """Manually advanced clock for timer tests"""

    def __init__(self, start: datetime = datetime(2026, 10, 19, 9, 0, 0)):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
