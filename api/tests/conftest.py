import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from forumhub.core import config

# Cheap hashes keep the per-request bcrypt check fast.
config.settings.auth_bcrypt_rounds = 4
config.settings.auth_username = "user"
config.settings.auth_password = "password"
config.settings.auth_password_hash = None

from forumhub.api.deps import get_topic_repository  # noqa: E402
from forumhub.db.base import Base  # noqa: E402
from forumhub.db.session import get_session  # noqa: E402
from forumhub.main import create_app  # noqa: E402
from tests.utils import InMemoryTopicRepository  # noqa: E402

AUTH = ("user", "password")


@pytest_asyncio.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(test_engine):
    return async_sessionmaker(bind=test_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def app(session_factory):
    async def _get_session():
        async with session_factory() as session:
            yield session

    app = create_app()
    app.dependency_overrides[get_session] = _get_session
    return app


@pytest_asyncio.fixture
async def anon_client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", auth=AUTH) as client:
        yield client


@pytest_asyncio.fixture
async def fake_repo():
    return InMemoryTopicRepository()


@pytest_asyncio.fixture
async def fake_client(fake_repo):
    app = create_app()
    app.dependency_overrides[get_topic_repository] = lambda: fake_repo
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", auth=AUTH) as client:
        yield client
