from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.core.config import Settings
from app.core.events import EventDispatcher
from app.core.hashids import HashIdCodec, HashIdOptions
from app.core.security.password import hash_password
from app.db.session import build_engine, build_session_factory, init_models
from app.main import create_app
from app.models import User
from app.repositories import UserRepository
from app.services import HashIdService, UserService

TEST_SALT = "test-salt"


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use the cheapest bcrypt work factor so registration tests stay fast."""
    monkeypatch.setattr("app.core.security.password.BCRYPT_ROUNDS", 4)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        hashid_salt=TEST_SALT,
    )


@pytest.fixture
def codec() -> HashIdCodec:
    return HashIdCodec(HashIdOptions(salt=TEST_SALT))


@pytest.fixture
async def engine(settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    engine = build_engine(settings)
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def user_repo(session: AsyncSession) -> UserRepository:
    return UserRepository(session)


@pytest.fixture
def hashids(codec: HashIdCodec, user_repo: UserRepository) -> HashIdService[User]:
    return HashIdService(codec, user_repo)


@pytest.fixture
def events() -> EventDispatcher:
    return EventDispatcher()


@pytest.fixture
def user_service(
    session: AsyncSession, user_repo: UserRepository, hashids: HashIdService[User], events: EventDispatcher
) -> UserService:
    return UserService(session, user_repo, hashids, events)


@pytest.fixture
def make_user(user_repo: UserRepository):
    """Inserts a user row directly, without materializing its hashid."""
    counter = 0

    async def _make_user(**overrides: Any) -> User:
        nonlocal counter
        counter += 1
        data = {
            "first_name": "Ada",
            "last_name": "Lovelace",
            "username": f"ada{counter}",
            "email": f"ada{counter}@example.com",
            "password_hash": hash_password("correct horse"),
        }
        data.update(overrides)
        return await user_repo.create(data)

    return _make_user


@pytest.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    app = create_app(settings)
    await init_models(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
