import asyncio
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from common import configure_observability, create_database_engines, setup_logging

from . import models  # noqa: F401  (registers tables on Base.metadata)
from .config import Settings, get_settings
from .database import Base, get_db
from .migrations_runner import run_migrations
from .routers import api_routers, pages_router
from .services import ServiceError


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
	settings = settings or get_settings()
	setup_logging(settings.log_level, settings.log_format)

	engine, SessionLocal = create_database_engines(settings)

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		if settings.run_migrations:
			await asyncio.to_thread(run_migrations, settings)
		if settings.create_tables:
			async with engine.begin() as conn:
				await conn.run_sync(Base.metadata.create_all)
		logger.info("%s started", settings.app_name)
		yield
		await engine.dispose()
		logger.info("%s stopped", settings.app_name)

	app = FastAPI(title=settings.app_name, lifespan=lifespan)
	app.state.settings = settings
	app.state.engine = engine
	app.state.session_factory = SessionLocal

	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.cors_origins,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	@app.exception_handler(ServiceError)
	async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
		log = logger.error if exc.status_code >= 500 else logger.warning
		log(
			"ServiceError: %s",
			exc.message,
			extra={"path": request.url.path, "method": request.method, "status_code": exc.status_code},
		)
		return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})

	@app.exception_handler(Exception)
	async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
		logger.error(
			"Unhandled exception: %s",
			exc,
			exc_info=exc,
			extra={"path": request.url.path, "method": request.method},
		)
		return JSONResponse(status_code=500, content={"detail": str(exc)})

	configure_observability(app, settings=settings, get_db=get_db)

	@app.get("/api/", tags=["index"])
	def api_index() -> dict[str, str]:
		return {"message": "Welcome to the API!"}

	for router in api_routers:
		app.include_router(router)
	app.include_router(pages_router)

	return app


def run() -> None:
	import uvicorn

	uvicorn.run("webshop_service.app.main:create_app", factory=True, host="0.0.0.0", port=8000)
