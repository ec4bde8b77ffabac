"""Shared fixtures: SQLite database, fake third-party clients and logged-in HTTP clients."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from childrenlk.config import Settings
from childrenlk.main import create_app
from childrenlk.models.base import Database
from childrenlk.models.organization import Organization
from childrenlk.models.user import User
from childrenlk.services.mailer import MailerError
from childrenlk.services.media_host import UploadError, UploadResult
from tests.helpers import create_organizer, create_user, login


class FakeMailer:
    """Records messages instead of calling Brevo."""

    def __init__(self):
        self.sent = []
        self.fail = False

    async def _send(self, kind: str, to: str, **context):
        if self.fail:
            raise MailerError(f"Brevo rejected email to {to}")
        self.sent.append({"kind": kind, "to": to, **context})

    async def send_otp(self, to, otp, ttl_minutes=10):
        await self._send("otp", to, otp=otp, ttl_minutes=ttl_minutes)

    async def send_organizer_credentials(self, to, name, login_email, password):
        await self._send("credentials", to, name=name, login_email=login_email, password=password)

    async def aclose(self):
        pass


class FakeMediaHost:
    def __init__(self):
        self.uploads = []
        self.fail = False

    async def upload(self, file, folder=None, resource_type="auto"):
        if self.fail:
            raise UploadError("Cloudinary upload failed: 502")
        self.uploads.append({"file": file, "folder": folder, "resource_type": resource_type})
        n = len(self.uploads)
        return UploadResult(url=f"https://res.cloudinary.com/demo/{n}.png", public_id=f"childrenlk/{n}")

    async def aclose(self):
        pass


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.dispose()


@pytest.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def mailer() -> FakeMailer:
    return FakeMailer()


@pytest.fixture
def media_host() -> FakeMediaHost:
    return FakeMediaHost()


@pytest.fixture
def app(database, mailer, media_host):
    settings = Settings(
        database_url=database.url,
        secret_key="test-secret-key-for-testing-only",
        log_level="WARNING",
    )
    application = create_app(settings)
    # ASGITransport does not run the lifespan, so install clients directly
    application.state.database = database
    application.state.mailer = mailer
    application.state.media_host = media_host
    return application


@pytest.fixture
def make_client(app):
    """Factory for independent clients, each with its own session cookie."""

    @asynccontextmanager
    async def _make():
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            yield client

    return _make


@pytest.fixture
async def client(make_client) -> AsyncGenerator[AsyncClient, None]:
    async with make_client() as c:
        yield c


@pytest.fixture
async def admin_user(db_session) -> User:
    return await create_user(db_session, "admin")


@pytest.fixture
async def parent_user(db_session) -> User:
    return await create_user(db_session, "parent")


@pytest.fixture
async def organizer(db_session) -> tuple[User, Organization]:
    return await create_organizer(db_session, "Org A")


@pytest.fixture
async def other_organizer(db_session) -> tuple[User, Organization]:
    return await create_organizer(db_session, "Org B")


@pytest.fixture
async def admin_client(make_client, admin_user):
    async with make_client() as c:
        await login(c, admin_user.email)
        yield c


@pytest.fixture
async def organizer_client(make_client, organizer):
    async with make_client() as c:
        await login(c, organizer[0].email)
        yield c


@pytest.fixture
async def other_organizer_client(make_client, other_organizer):
    async with make_client() as c:
        await login(c, other_organizer[0].email)
        yield c


@pytest.fixture
async def parent_client(make_client, parent_user):
    async with make_client() as c:
        await login(c, parent_user.email)
        yield c
