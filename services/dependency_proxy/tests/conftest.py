"""Shared fixtures for Dependency Proxy tests."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from app.core.config import DependencyProxySettings


@pytest.fixture
def write_service_config(tmp_path: Path) -> Callable[[Any], str]:
    """Write a configuration document (dict or raw text) and return its path."""

    def _write(document: Any) -> str:
        path = tmp_path / "app-config.json"
        path.write_text(document if isinstance(document, str) else json.dumps(document))
        return str(path)

    return _write


@pytest.fixture
def make_settings() -> Callable[..., DependencyProxySettings]:
    def _make(**overrides: Any) -> DependencyProxySettings:
        return DependencyProxySettings(_env_file=None, **overrides)

    return _make


@pytest.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Real httpx client for respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client
