from common import BaseServiceSettings, make_get_settings


class Settings(BaseServiceSettings):
	app_name: str = "Codegram Webshop"
	access_token_expire_minutes: int = 60
	cors_origins: list[str] = ["http://localhost:3000"]

	# Logging
	log_level: str = "INFO"
	log_format: str = "json"

	# Schema management on startup: Alembic for deployed databases,
	# create_all for throwaway SQLite files
	run_migrations: bool = False
	create_tables: bool = False


get_settings = make_get_settings(Settings)
