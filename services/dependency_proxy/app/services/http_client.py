"""Dependency Proxy — shared outbound HTTP client."""

from __future__ import annotations

import httpx
import structlog

from app.core.config import DependencyProxySettings

logger = structlog.get_logger()


async def _log_request(request: httpx.Request) -> None:
    # Header names only: forwarded values include credentials.
    logger.debug(
        "downstream_request",
        method=request.method,
        url=str(request.url),
        headers=sorted(request.headers.keys()),
    )


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.debug(
        "downstream_response",
        method=request.method,
        url=str(request.url),
        status=response.status_code,
    )


def create_http_client(app_settings: DependencyProxySettings) -> httpx.AsyncClient:
    """Build the process-wide client used for every dependency call.

    The timeout applies to each call individually; the pool is sized so a
    single fan-out never waits on a connection.
    """
    pool_size = max(1, app_settings.downstream_max_concurrency)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(app_settings.downstream_timeout),
        limits=httpx.Limits(
            max_connections=pool_size * 4,
            max_keepalive_connections=pool_size,
        ),
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )
