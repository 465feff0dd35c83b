"""Dependency Proxy — service configuration loading.

The configuration document is read once, during application startup, and the
resulting snapshot is shared read-only by every request.
"""

from __future__ import annotations

import pathlib

import structlog
from pydantic import ValidationError

from app.core.config import DependencyProxySettings
from app.core.errors import ConfigLoadError
from app.schemas.service_config import ServiceConfig

logger = structlog.get_logger()


def load_service_config(path: str) -> ServiceConfig:
    """Read and parse the configuration document at ``path``.

    Raises:
        ConfigLoadError: the path is unset, the file cannot be read, or its
            content is not a valid configuration document.
    """
    if not path:
        raise ConfigLoadError(path, "APP_CONFIG_PATH is not set")

    logger.info("service_config_reading", path=path)
    try:
        raw = pathlib.Path(path).read_bytes()
    except OSError as exc:
        raise ConfigLoadError(path, str(exc)) from exc

    try:
        config = ServiceConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise ConfigLoadError(path, f"invalid document: {exc}") from exc

    logger.info(
        "service_config_loaded",
        name=config.name,
        version=config.version,
        dependencies=[dep.name for dep in config.dependencies],
    )
    return config


def resolve_service_config(app_settings: DependencyProxySettings) -> ServiceConfig:
    """Load the configuration, falling back to an empty one only when allowed."""
    try:
        return load_service_config(app_settings.app_config_path)
    except ConfigLoadError as exc:
        if not app_settings.allow_empty_config:
            raise
        logger.error(
            "service_config_load_failed",
            path=exc.path,
            reason=exc.reason,
            fallback="empty",
        )
        return ServiceConfig()
