# backend/tests/conftest.py
import os

# Settings are read at import time; configure before importing fittrack.
os.environ.setdefault("SESSION_COOKIE_SECRET", "test-session-cookie-secret-0123456789abcdef")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from fittrack.core.database import get_session
from fittrack.core.security import hash_password
from fittrack.main import app
from fittrack.models import Base, User, UserType

TEST_SECRET = os.environ["SESSION_COOKIE_SECRET"]
DEFAULT_PASSWORD = "password123"


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory SQLite database per test."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_user(db):
    """Insert a user with a hashed password."""
    async def _make_user(
        username: str = "alice",
        password: str = DEFAULT_PASSWORD,
        type: UserType = UserType.USER,
        **fields,
    ) -> User:
        user = User(
            username=username,
            name=fields.pop("name", username.capitalize()),
            last_name=fields.pop("last_name", "Tester"),
            email=fields.pop("email", f"{username}@example.com"),
            password=hash_password(password),
            type=type,
            **fields,
        )
        db.add(user)
        await db.commit()
        return user

    return _make_user


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


def session_cookie_from(response) -> str:
    """Extract the session cookie value from a Set-Cookie header."""
    header = response.headers["set-cookie"]
    name, _, value = header.split(";")[0].partition("=")
    assert name == "session"
    return value


@pytest.fixture
def login(client):
    """Log in and return headers carrying the session cookie.

    The client's own cookie jar is cleared so every request states its
    credentials explicitly.
    """
    async def _login(username: str, password: str = DEFAULT_PASSWORD) -> dict[str, str]:
        response = await client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        client.cookies.clear()
        return {"Cookie": f"session={session_cookie_from(response)}"}

    return _login
