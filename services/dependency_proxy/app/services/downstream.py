"""Dependency Proxy — calls to a single downstream dependency.

Every outcome is mapped to a ``CallOutcome``; nothing is raised to the
caller. Whenever a call fails, the dependency is represented by a placeholder
node (version ``unknown``, status ``0``) whatever the failure kind.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import httpx
import structlog
from pydantic import ValidationError

from app.core.errors import (
    DownstreamDecodeError,
    DownstreamError,
    DownstreamStatusError,
    DownstreamTransportError,
)
from app.schemas.response import ResponseNode
from app.schemas.service_config import DependencyRef

logger = structlog.get_logger()

# Inbound headers propagated to every dependency call, when present
FORWARDED_HEADERS: tuple[str, ...] = (
    "Authorization",
    "app-version",
    "x-request-id",
    "x-b3-traceid",
    "x-b3-spanid",
    "x-b3-parentspanid",
    "x-b3-sampled",
    "x-b3-flags",
    "x-ot-span-context",
)


@dataclass(frozen=True)
class CallOutcome:
    """Result of calling one dependency during one aggregation."""

    response: ResponseNode
    http_status: int = 0
    error: DownstreamError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def select_forwarded_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Pick the allow-listed headers out of the inbound request headers.

    Lookup is case-insensitive and the first occurrence of a repeated header
    wins. Absent or empty headers are left out; headers outside the
    allow-list are never touched.
    """
    inbound: dict[str, str] = {}
    for key, value in headers.items():
        inbound.setdefault(key.lower(), value)

    forwarded: dict[str, str] = {}
    for name in FORWARDED_HEADERS:
        value = inbound.get(name.lower())
        if value:
            forwarded[name] = value
    return forwarded


def _encode_headers(headers: Mapping[str, str]) -> list[tuple[str, bytes]]:
    # ASGI servers decode header values as latin-1; send the original bytes back.
    return [(name, value.encode("latin-1")) for name, value in headers.items()]


def _failure(dependency: DependencyRef, error: DownstreamError) -> CallOutcome:
    logger.warning(
        "downstream_call_failed",
        dependency=dependency.name,
        url=dependency.url,
        kind=error.kind,
        http_status=error.http_status,
        error=error.message,
    )
    return CallOutcome(
        response=ResponseNode.placeholder(dependency.name),
        http_status=error.http_status,
        error=error,
    )


async def call_dependency(
    http_client: httpx.AsyncClient,
    dependency: DependencyRef,
    headers: Mapping[str, str],
) -> CallOutcome:
    """POST to ``dependency.url`` with an empty body and classify the answer."""
    try:
        async with http_client.stream(
            "POST", dependency.url, headers=_encode_headers(headers)
        ) as response:
            status_code = response.status_code
            if not response.is_success:
                return _failure(
                    dependency,
                    DownstreamStatusError(
                        dependency.name,
                        f"{status_code} {response.reason_phrase}".strip(),
                        status_code,
                    ),
                )
            try:
                body = await response.aread()
            except httpx.HTTPError as exc:
                return _failure(
                    dependency,
                    DownstreamDecodeError(
                        dependency.name, f"failed to read body: {exc}", status_code
                    ),
                )
    except (httpx.TransportError, httpx.InvalidURL) as exc:
        return _failure(
            dependency,
            DownstreamTransportError(dependency.name, str(exc) or type(exc).__name__),
        )

    try:
        node = ResponseNode.model_validate_json(body)
    except ValidationError as exc:
        return _failure(
            dependency,
            DownstreamDecodeError(
                dependency.name, f"failed to decode body: {exc}", status_code
            ),
        )

    logger.info(
        "downstream_call_succeeded",
        dependency=dependency.name,
        http_status=status_code,
        status=node.status,
    )
    return CallOutcome(response=node, http_status=status_code)
