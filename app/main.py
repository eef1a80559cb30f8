import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from app.api.routes_system import router as system_router
from app.api.routes_tasks import router as tasks_router
from app.core.config import Settings, get_settings
from app.core.db import MongoDatabase
from app.core.errors import register_exception_handlers
from app.core.logging_setup import setup_logging
from app.core.metrics import MetricsCollector

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    database: MongoDatabase = app.state.database
    try:
        database.connect()
        logger.info("MongoDB connected: %s", settings.mongo_uri)
    except PyMongoError as exc:
        logger.warning("MongoDB not available: %s", exc)
        logger.warning("Running without database - health endpoint still works")

    logger.info("TaskMaster API running on port %s", settings.port)
    logger.info("Health: http://localhost:%s/health", settings.port)
    logger.info("Metrics: http://localhost:%s/metrics", settings.port)
    try:
        yield
    finally:
        database.close()


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[MongoDatabase] = None,
    metrics: Optional[MetricsCollector] = None,
) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="TaskMaster API",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database or MongoDatabase.from_settings(settings)
    app.state.metrics = metrics or MetricsCollector()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def count_requests(request: Request, call_next):
        request.app.state.metrics.record_request()
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    register_exception_handlers(app)

    app.include_router(system_router)
    app.include_router(tasks_router)
    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
