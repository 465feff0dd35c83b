"""Dependency Proxy — fan-out over every configured dependency."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping

import httpx
import structlog

from app.schemas.service_config import DependencyRef, ServiceConfig
from app.services.downstream import CallOutcome, call_dependency

logger = structlog.get_logger()


async def aggregate(
    http_client: httpx.AsyncClient,
    config: ServiceConfig,
    headers: Mapping[str, str],
    *,
    max_concurrency: int = 10,
) -> tuple[list[CallOutcome], bool]:
    """Call every dependency concurrently and collect the outcomes.

    At most ``max_concurrency`` calls are in flight at once. Outcomes are
    returned in configuration order, one per dependency. The second element
    is True when at least one call failed; there is no partial tier.

    Cancelling the calling task cancels every call still in flight. An
    unexpected exception in one call cancels its siblings and is re-raised
    inside an ``ExceptionGroup``.
    """
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def _bounded(dependency: DependencyRef) -> CallOutcome:
        async with semaphore:
            return await call_dependency(http_client, dependency, headers)

    logger.info(
        "dependency_fanout",
        dependencies=len(config.dependencies),
        max_concurrency=max_concurrency,
    )
    async with asyncio.TaskGroup() as group:
        tasks = [group.create_task(_bounded(dep)) for dep in config.dependencies]

    outcomes = [task.result() for task in tasks]
    failed = [outcome.response.name for outcome in outcomes if outcome.failed]
    if failed:
        logger.warning("dependency_fanout_degraded", failed=failed)
    return outcomes, bool(failed)
