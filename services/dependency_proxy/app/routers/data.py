"""Dependency Proxy — aggregation endpoint."""

from __future__ import annotations

import httpx
import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.core.config import DependencyProxySettings
from app.core.state import get_http_client, get_service_config, get_settings
from app.schemas.service_config import ServiceConfig
from app.services.aggregator import aggregate
from app.services.composer import compose
from app.services.downstream import select_forwarded_headers

router = APIRouter(prefix="/api", tags=["Aggregation"])
logger = structlog.get_logger()


@router.post("/data", response_class=JSONResponse)
async def aggregate_dependencies(
    request: Request,
    config: ServiceConfig = Depends(get_service_config),
    http_client: httpx.AsyncClient = Depends(get_http_client),
    app_settings: DependencyProxySettings = Depends(get_settings),
) -> JSONResponse:
    """Call every dependency and answer with the aggregated tree (201 or 503)."""
    if not config.has_dependencies:
        logger.info("no_dependencies", service=config.name)
        node, status_code = compose(config, [], False)
        return JSONResponse(content=node.to_wire(), status_code=status_code)

    outcomes, failed = await aggregate(
        http_client,
        config,
        select_forwarded_headers(request.headers),
        max_concurrency=app_settings.downstream_max_concurrency,
    )
    node, status_code = compose(config, outcomes, failed)
    return JSONResponse(content=node.to_wire(), status_code=status_code)
