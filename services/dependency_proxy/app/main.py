"""Dependency Proxy — FastAPI application factory.

Answers ``POST /api/data`` by calling every configured dependency and
reporting the whole dependency tree in one response.
"""

from __future__ import annotations

import time

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import DependencyProxySettings, settings
from app.core.events import lifespan
from app.routers import health
from app.routers.data import router as data_router

from shared.logging import setup_logging
from shared.middleware import RequestContextMiddleware

log = structlog.get_logger()


def create_app(app_settings: DependencyProxySettings | None = None) -> FastAPI:
    started = time.perf_counter()
    app_settings = app_settings or settings

    setup_logging(
        log_level=app_settings.log_level,
        json_logs=app_settings.json_logs,
        service_name=app_settings.service_name,
    )

    application = FastAPI(
        title="Dependency Proxy",
        version="0.1.0",
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )
    application.state.settings = app_settings

    application.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_allow_origins,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    )

    application.add_middleware(RequestContextMiddleware)

    # Routers
    application.include_router(health.router)
    application.include_router(data_router)

    log.info(
        "app_initialized",
        elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
    )
    return application


app = create_app()
