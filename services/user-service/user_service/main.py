"""FastAPI application wiring for the user service."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from psycopg_pool import ConnectionPool

from .api.routes import router as users_router
from .config import get_settings
from .domain.handler import UserCreationHandler
from .domain.service import UserService
from .faults.injector import FaultInjector
from .repository import UserRepository

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def build_handler(repository: UserRepository) -> UserCreationHandler:
    """Assemble the request handler from settings around ``repository``."""
    injector = FaultInjector(settings.fault_reject_percent, seed=settings.fault_seed)
    logger.info("fault injector rejecting %d%% of user creation requests", injector.reject_percent)
    return UserCreationHandler(
        UserService(repository),
        injector,
        default_source=settings.default_source,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise shared resources (Postgres pool, handler) for the app lifecycle."""
    pool = ConnectionPool(settings.database_url, open=False)
    pool.open()
    app.state.pool = pool
    app.state.user_handler = build_handler(UserRepository(pool))
    try:
        yield
    finally:
        pool.close()


app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)

# CORS for local frontend dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_origin_regex=".*",  # dev: allow any origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=600,
)


@app.get("/healthz", tags=["health"])
def healthz() -> dict[str, str]:
    """Return a minimal readiness indicator used by orchestration systems."""
    return {"status": "ok"}


@app.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


app.include_router(users_router)


def run() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(app, host=settings.http_host, port=settings.http_port)
