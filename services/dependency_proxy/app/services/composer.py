"""Dependency Proxy — builds the response tree from the fan-out outcomes."""

from __future__ import annotations

from collections.abc import Sequence

from fastapi import status

from app.schemas.response import STATUS_HEALTHY, STATUS_UNAVAILABLE, ResponseNode
from app.schemas.service_config import ServiceConfig
from app.services.downstream import CallOutcome


def compose(
    config: ServiceConfig,
    outcomes: Sequence[CallOutcome],
    overall_failed: bool,
) -> tuple[ResponseNode, int]:
    """Return the self node and the HTTP status code to answer with.

    201 is used as the healthy code, 503 as soon as one dependency failed.
    Failed dependencies still appear as children, in configuration order.
    """
    if not config.has_dependencies:
        node = ResponseNode(name=config.name, version=config.version, status=STATUS_HEALTHY)
        return node, status.HTTP_201_CREATED

    children = [outcome.response for outcome in outcomes]
    if overall_failed:
        node = ResponseNode(
            name=config.name,
            version=config.version,
            status=STATUS_UNAVAILABLE,
            dependencies=children,
        )
        return node, status.HTTP_503_SERVICE_UNAVAILABLE

    node = ResponseNode(
        name=config.name,
        version=config.version,
        status=STATUS_HEALTHY,
        dependencies=children,
    )
    return node, status.HTTP_201_CREATED
