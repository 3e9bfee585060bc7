from .observability import JSONFormatter, configure_observability, setup_logging
from .database import Base, create_database_engines, get_db, resolve_async_url, resolve_sync_url
from .security import (
	CurrentUser,
	bearer_scheme,
	create_access_token,
	decode_access_token,
	make_get_current_user,
	make_require_role,
)
from .config import BaseServiceSettings, make_get_settings

__all__ = [
	"JSONFormatter",
	"configure_observability",
	"setup_logging",
	# Database
	"Base",
	"create_database_engines",
	"get_db",
	"resolve_async_url",
	"resolve_sync_url",
	# Security
	"CurrentUser",
	"bearer_scheme",
	"create_access_token",
	"decode_access_token",
	"make_get_current_user",
	"make_require_role",
	# Config
	"BaseServiceSettings",
	"make_get_settings",
]
