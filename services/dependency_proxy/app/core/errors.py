"""Dependency Proxy — error taxonomy.

``ConfigLoadError`` is raised at startup. The ``DownstreamError`` family is
never raised out of a fan-out: each instance is recorded on the
``CallOutcome`` of the dependency that produced it.
"""

from __future__ import annotations


class ConfigLoadError(Exception):
    """The service configuration document is unreadable or malformed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"failed to load service configuration from {path!r}: {reason}")


class DownstreamError(Exception):
    """Base class for a failed call to one dependency."""

    kind = "downstream"

    def __init__(self, dependency: str, message: str, http_status: int = 0):
        self.dependency = dependency
        self.message = message
        self.http_status = http_status
        super().__init__(message)


class DownstreamTransportError(DownstreamError):
    """The call never completed (connection refused, DNS, timeout...)."""

    kind = "transport"


class DownstreamStatusError(DownstreamError):
    """The dependency answered with a non-2xx status."""

    kind = "status"


class DownstreamDecodeError(DownstreamError):
    """A 2xx body could not be read or decoded as a response node."""

    kind = "decode"
