from __future__ import annotations

from logging import getLogger
from pathlib import Path

from alembic import command
from alembic.config import Config

from common import resolve_sync_url

from .config import Settings


logger = getLogger(__name__)


def get_alembic_config(settings: Settings) -> Config:
	# Alembic environment lives next to this file in migrations/
	base_dir = Path(__file__).resolve().parent

	alembic_cfg = Config()
	alembic_cfg.set_main_option("script_location", str(base_dir / "migrations"))
	# configparser interpolation: a literal % must be doubled
	db_url = resolve_sync_url(settings.database_url).replace("%", "%%")
	alembic_cfg.set_main_option("sqlalchemy.url", db_url)
	return alembic_cfg


def run_migrations(settings: Settings, revision: str = "head") -> None:
	"""Apply pending Alembic migrations."""
	cfg = get_alembic_config(settings)
	try:
		command.upgrade(cfg, revision)
	except Exception as exc:
		logger.error("Failed to run migrations: %s", exc)
		raise
	logger.info("Alembic migrations applied", extra={"revision": revision})
