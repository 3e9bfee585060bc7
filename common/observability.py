from __future__ import annotations

import inspect
import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Depends, FastAPI, HTTPException, Response, status
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

HealthCheck = Callable[[AsyncSession | None], Awaitable[None] | None]

_LOG_EXTRA_FIELDS = ("path", "method", "status_code", "error", "revision")


class JSONFormatter(logging.Formatter):
	"""One JSON object per log line."""

	def format(self, record: logging.LogRecord) -> str:
		log = {
			"timestamp": datetime.now(timezone.utc).isoformat(),
			"level": record.levelname,
			"logger": record.name,
			"message": record.getMessage(),
		}
		for key in _LOG_EXTRA_FIELDS:
			val = record.__dict__.get(key)
			if val is not None:
				log[key] = val
		if record.exc_info:
			log["exception"] = self.formatException(record.exc_info)
		return json.dumps(log, ensure_ascii=False, default=str)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
	"""Install a single root handler; calling it again replaces the previous one."""
	handler = logging.StreamHandler()
	if fmt == "json":
		handler.setFormatter(JSONFormatter())
	else:
		handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
	root = logging.getLogger()
	for existing in list(root.handlers):
		if getattr(existing, "_webshop_handler", False):
			root.removeHandler(existing)
	handler._webshop_handler = True  # type: ignore[attr-defined]
	root.addHandler(handler)
	root.setLevel(getattr(logging, level.upper(), logging.INFO))


def configure_observability(
	app: FastAPI,
	*,
	settings: Any,
	get_db: Optional[Callable[..., Any]] = None,
	extra_checks: Mapping[str, HealthCheck] | None = None,
) -> None:
	"""Attach shared /healthz and /metrics endpoints with optional extra checks."""
	metrics_enabled = getattr(settings, "metrics_enabled", False)
	instrumentator = Instrumentator().instrument(app) if metrics_enabled else None
	if instrumentator:
		app.state.instrumentator = instrumentator

	checks = dict(extra_checks or {})

	async def _run_check(name: str, check: HealthCheck, db: AsyncSession | None) -> None:
		try:
			result = check(db)
			if inspect.isawaitable(result):
				await result
		except Exception as exc:
			raise HTTPException(
				status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
				detail={"status": "error", "check": name, "error": str(exc)},
			) from exc

	if get_db:

		@app.get("/healthz", include_in_schema=False)
		async def healthz(db: AsyncSession = Depends(get_db)) -> JSONResponse:
			results: dict[str, str] = {}
			try:
				await db.execute(text("SELECT 1"))
				results["database"] = "ok"
			except Exception as exc:
				raise HTTPException(
					status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
					detail={"status": "error", "check": "database", "error": str(exc)},
				) from exc

			for name, check in checks.items():
				await _run_check(name, check, db)
				results[name] = "ok"

			return JSONResponse({"status": "ok", "checks": results})

	else:

		@app.get("/healthz", include_in_schema=False)
		async def healthz() -> JSONResponse:
			results: dict[str, str] = {"database": "skipped"}
			for name, check in checks.items():
				await _run_check(name, check, None)
				results[name] = "ok"
			return JSONResponse({"status": "ok", "checks": results})

	@app.get("/metrics", include_in_schema=False)
	def metrics() -> Response:
		if not metrics_enabled:
			return JSONResponse({"detail": "Metrics disabled"}, status_code=404)
		content = generate_latest()
		return Response(content=content, media_type=CONTENT_TYPE_LATEST)
