"""Base settings class shared by the webshop services."""
from functools import lru_cache
from typing import Callable

from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseServiceSettings(BaseSettings):
	"""Settings every service needs: database, JWT and metrics."""

	app_name: str
	database_url: str
	database_url_async: str | None = None
	jwt_secret: str
	jwt_algorithm: str = "HS256"
	metrics_enabled: bool = True

	# Connection pool (ignored for SQLite)
	db_pool_size: int = 10
	db_max_overflow: int = 20
	db_pool_timeout: int = 30  # seconds
	db_pool_recycle: int = 1800  # seconds

	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


def make_get_settings(settings_class: type[BaseServiceSettings]) -> Callable:
	"""
	Build a cached ``get_settings`` function for a concrete service.

	Args:
		settings_class: Subclass of BaseServiceSettings

	Returns:
		A zero-argument function returning one settings instance per process
	"""
	@lru_cache
	def get_settings() -> BaseServiceSettings:
		return settings_class()

	return get_settings
