"""Dependency Proxy — application lifespan (startup / shutdown hooks)."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from app.core.config import DependencyProxySettings
from app.services.http_client import create_http_client
from app.services.service_config import resolve_service_config

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the configuration snapshot and open the shared HTTP client.

    A configuration load failure propagates from here, so the server never
    starts accepting traffic without one (unless ``allow_empty_config``).
    """
    app_settings: DependencyProxySettings = app.state.settings
    log.info(
        "dependency_proxy starting up",
        app_config_path=app_settings.app_config_path,
        downstream_timeout=app_settings.downstream_timeout,
        downstream_max_concurrency=app_settings.downstream_max_concurrency,
    )

    app.state.service_config = resolve_service_config(app_settings)
    app.state.http_client = create_http_client(app_settings)

    yield

    log.info("dependency_proxy shutting down")
    await app.state.http_client.aclose()
