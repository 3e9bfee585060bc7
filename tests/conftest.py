"""Shared fixtures: one fresh SQLite database and app per test."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from common import create_access_token
from webshop_service.app.config import Settings
from webshop_service.app.database import Base
from webshop_service.app.main import create_app


@pytest.fixture
def settings(tmp_path):
	return Settings(
		database_url=f"sqlite+aiosqlite:///{tmp_path / 'webshop.db'}",
		jwt_secret="test-secret",
		metrics_enabled=False,
		log_format="text",
		log_level="WARNING",
	)


@pytest.fixture
async def app(settings):
	application = create_app(settings)
	engine = application.state.engine
	async with engine.begin() as conn:
		await conn.run_sync(Base.metadata.create_all)
	yield application
	await engine.dispose()


@pytest.fixture
async def client(app):
	async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
		yield c


@pytest.fixture
async def db(app):
	async with app.state.session_factory() as session:
		yield session


@pytest.fixture
def make_token(settings):
	def _make(user_id: str, role: str = "user") -> dict[str, str]:
		token = create_access_token(user_id, role=role, jwt_secret=settings.jwt_secret)
		return {"Authorization": f"Bearer {token}"}

	return _make


@pytest.fixture
def create_user(client):
	async def _create(username: str = "alice", password: str = "correct-horse", **extra) -> dict:
		payload = {"username": username, "email": f"{username}@example.com", "password": password, **extra}
		response = await client.post("/api/users", json=payload)
		assert response.status_code == 201, response.text
		return response.json()

	return _create


@pytest.fixture
def create_course(client):
	async def _create(name: str = "Async Python", **extra) -> dict:
		response = await client.post("/api/courses", json={"name": name, **extra})
		assert response.status_code == 201, response.text
		return response.json()

	return _create
