import pytest
from httpx import ASGITransport, AsyncClient

from todo_api.config import Settings
from todo_api.main import create_app

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        create_tables=True,
    )

@pytest.fixture
async def initialized_app(settings):
    app = create_app(settings)
    # ASGITransport does not run lifespan events
    async with app.router.lifespan_context(app):
        yield app

@pytest.fixture
async def client(initialized_app):
    transport = ASGITransport(app=initialized_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

@pytest.fixture
async def ana(client):
    payload = {"name": "Ana", "email": "a@x.com", "password1": "p", "password2": "p"}
    res = await client.post("/auths", json=payload)
    return res.json()
