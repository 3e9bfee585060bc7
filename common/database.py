"""Database helpers shared by the webshop services."""
from collections.abc import AsyncIterator
from typing import Any

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
	"""Base class for all SQLAlchemy models."""
	pass


_ASYNC_REPLACEMENTS = [
	("+psycopg2", "+asyncpg"),
	("+psycopg", "+asyncpg"),
	("postgresql://", "postgresql+asyncpg://"),
	("postgres://", "postgresql+asyncpg://"),
	("sqlite://", "sqlite+aiosqlite://"),
]

_SYNC_REPLACEMENTS = [
	("+asyncpg", "+psycopg2"),
	("+aiosqlite", ""),
	("postgres://", "postgresql+psycopg2://"),
]


def resolve_async_url(database_url: str, database_url_async: str | None) -> str:
	"""
	Turn a synchronous database URL into its async driver counterpart.

	Args:
		database_url: Database URL as configured (sync or async driver)
		database_url_async: Explicit async URL; wins when set

	Returns:
		URL usable with ``create_async_engine``

	Raises:
		ValueError: If the URL is neither PostgreSQL nor SQLite
	"""
	if database_url_async:
		return database_url_async
	if "+asyncpg" in database_url or "+aiosqlite" in database_url:
		return database_url
	for needle, replacement in _ASYNC_REPLACEMENTS:
		if needle in database_url:
			return database_url.replace(needle, replacement, 1)
	raise ValueError(
		"Cannot derive an async URL: set database_url_async or use PostgreSQL/SQLite"
	)


def resolve_sync_url(database_url: str) -> str:
	"""Inverse of ``resolve_async_url``, used by Alembic which runs synchronously."""
	for needle, replacement in _SYNC_REPLACEMENTS:
		if needle in database_url:
			return database_url.replace(needle, replacement, 1)
	return database_url


def _is_sqlite(url: str) -> bool:
	return make_url(url).get_backend_name() == "sqlite"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
	# SQLite ignores REFERENCES clauses unless asked per connection
	cursor = dbapi_connection.cursor()
	cursor.execute("PRAGMA foreign_keys=ON")
	cursor.close()


def create_database_engines(settings: Any) -> tuple[AsyncEngine, async_sessionmaker]:
	"""
	Create the async engine and session factory for a service.

	Args:
		settings: Object with database_url, database_url_async and the
			db_pool_* attributes of BaseServiceSettings

	Returns:
		Tuple (async_engine, SessionLocal)
	"""
	url = resolve_async_url(settings.database_url, settings.database_url_async)
	engine_kwargs: dict[str, Any] = {"pool_pre_ping": True}
	if not _is_sqlite(url):
		engine_kwargs.update(
			pool_size=settings.db_pool_size,
			max_overflow=settings.db_max_overflow,
			pool_timeout=settings.db_pool_timeout,
			pool_recycle=settings.db_pool_recycle,
		)

	async_engine = create_async_engine(url, **engine_kwargs)
	if _is_sqlite(url):
		event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

	SessionLocal = async_sessionmaker(
		async_engine,
		expire_on_commit=False,
		autoflush=False,
		class_=AsyncSession,
	)

	return async_engine, SessionLocal


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
	"""
	FastAPI dependency yielding a session from the application's own factory.

	The factory lives on ``app.state.session_factory`` (set by the service's
	``create_app``), so handlers never touch a module-level engine.
	"""
	session_factory: async_sessionmaker = request.app.state.session_factory
	async with session_factory() as session:
		yield session
