import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from streeteats.core.config import Settings
from streeteats.main import create_app

ACCOUNT = {
    "fullName": "Asha Rao",
    "email": "asha@example.com",
    "phone": "9000000001",
    "password": "s3cret",
    "aadhar": "1234-5678-9012",
    "gst": "29ABCDE1234F1Z5",
    "shoploc": "MG Road",
    "shopname": "Asha Chaat Corner",
}


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        upload_dir=tmp_path / "uploads",
        app_env="test",
    )


@pytest.fixture
def upload_dir(settings):
    settings.upload_dir.mkdir(parents=True, exist_ok=True)
    return settings.upload_dir


@pytest_asyncio.fixture
async def app(settings, upload_dir):
    application = create_app(settings)
    await application.state.db.create_all()
    yield application
    await application.state.db.dispose()


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def session(app):
    async with app.state.db.session_factory() as s:
        yield s


@pytest.fixture
def register(client):
    """Register an account over HTTP and return its pending-list entry."""

    async def _register(role: str = "vendor", **overrides):
        payload = {**ACCOUNT, **overrides}
        path = "/api/register" if role == "vendor" else "/api/supplier/register"
        resp = await client.post(path, json=payload)
        assert resp.status_code == 200, resp.text

        pending = (await client.get("/api/unverified-users")).json()
        key = "vendors" if role == "vendor" else "suppliers"
        return next(a for a in pending[key] if a["email"] == payload["email"])

    return _register
