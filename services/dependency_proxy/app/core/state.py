"""Dependency Proxy — request dependencies backed by application state.

The lifespan stores the configuration snapshot and the shared HTTP client on
``app.state``; handlers receive them through ``Depends``.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from app.core.config import DependencyProxySettings
from app.schemas.service_config import ServiceConfig


def get_settings(request: Request) -> DependencyProxySettings:
    return request.app.state.settings


def get_service_config(request: Request) -> ServiceConfig:
    return request.app.state.service_config


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
