"""Dependency Proxy — health-check endpoints."""

from __future__ import annotations

from fastapi import Request

from shared.health import create_health_router


async def service_config_loaded(request: Request) -> bool:
    """Return True once the lifespan has stored the configuration snapshot."""
    return getattr(request.app.state, "service_config", None) is not None


# Dependency state is reported by POST /api/data, never by the probes.
router = create_health_router(readiness_checks=[service_config_loaded])
