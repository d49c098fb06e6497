"""
Pytest configuration and shared fixtures.
"""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from bookstore_api.api.main import app
from bookstore_api.core.deps import (
    get_author_repository,
    get_book_repository,
    get_current_active_user,
)
from bookstore_api.core.security import get_password_hash
from bookstore_api.db.base import Base
from bookstore_api.db.session import get_async_session
from bookstore_api.repositories.security import SecurityRepository

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite://"

ADMIN_ROLE = "Administrator"


class InMemoryRepository:
    """Dict-backed stand-in for a CrudRepository that records every call."""

    def __init__(self, create_result=True, update_result=True, delete_result=True):
        self.items = {}
        self.calls = []
        self.create_result = create_result
        self.update_result = update_result
        self.delete_result = delete_result
        self._next_id = 1

    async def find_all(self):
        self.calls.append("find_all")
        return list(self.items.values())

    async def find_by_id(self, entity_id):
        self.calls.append("find_by_id")
        return self.items.get(entity_id)

    async def exists(self, entity_id):
        self.calls.append("exists")
        return entity_id in self.items

    async def create(self, entity):
        self.calls.append("create")
        if not self.create_result:
            return False
        entity.id = self._next_id
        self._next_id += 1
        self.items[entity.id] = entity
        return True

    async def update(self, entity):
        self.calls.append("update")
        if not self.update_result:
            return False
        self.items[entity.id] = entity
        return True

    async def delete(self, entity):
        self.calls.append("delete")
        if not self.delete_result:
            return False
        self.items.pop(entity.id, None)
        return True


def make_user(*roles, is_active=True, user_id=1):
    return SimpleNamespace(id=user_id, is_active=is_active, role_names=list(roles))


@pytest.fixture
def author_repo():
    return InMemoryRepository()


@pytest.fixture
def book_repo():
    return InMemoryRepository()


@pytest.fixture
def api_client(author_repo, book_repo):
    """
    Test client whose repositories are in-memory fakes and whose caller is an
    administrator. Tests may replace the current user via `app.dependency_overrides`.
    """
    app.dependency_overrides[get_author_repository] = lambda: author_repo
    app.dependency_overrides[get_book_repository] = lambda: book_repo
    app.dependency_overrides[get_current_active_user] = lambda: make_user(ADMIN_ROLE)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def db_client():
    """
    Test client backed by a fresh in-memory SQLite database.

    Tables are created through the client's portal so that the engine is only
    ever used from the application's event loop.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    session_maker = async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False)

    async def override_get_async_session():
        async with session_maker() as session:
            yield session

    async def create_tables():
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    app.dependency_overrides[get_async_session] = override_get_async_session
    with TestClient(app) as client:
        client.portal.call(create_tables)
        client.session_maker = session_maker
        yield client
        client.portal.call(engine.dispose)
    app.dependency_overrides.clear()


def create_account(client, email, password, *roles):
    """Insert a user holding `roles` directly through the repository."""

    async def _create():
        async with client.session_maker() as session:
            repo = SecurityRepository(session)
            user = await repo.create_user(email=email, hashed_password=get_password_hash(password))
            for name in roles:
                role = await repo.ensure_role(name)
                await repo.assign_role_to_user(user.id, role.id)
            return user.id

    return client.portal.call(_create)


def login(client, email, password):
    response = client.post("/api/auth/login", data={"username": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_headers(db_client):
    create_account(db_client, "admin@bookstore.com", "P@ssword1", ADMIN_ROLE)
    return login(db_client, "admin@bookstore.com", "P@ssword1")


@pytest.fixture
def customer_headers(db_client):
    create_account(db_client, "customer@gmail.com", "P@ssword1", "Customer")
    return login(db_client, "customer@gmail.com", "P@ssword1")
