import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from person_api.core.config import Settings
from person_api.crud import InMemoryPersonStore
from person_api.main import create_app


@pytest.fixture
def settings():
    return Settings(MONGO_URI="mongodb://localhost:27017/persons_test")


@pytest.fixture
def store():
    return InMemoryPersonStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
