"""Dependency Proxy — environment-based configuration."""

from __future__ import annotations

from shared.config import BaseServiceSettings


class DependencyProxySettings(BaseServiceSettings):
    """Settings specific to the Dependency Proxy."""

    service_name: str = "dependency_proxy"
    service_port: int = 9999

    # Path of the JSON document listing this service and its dependencies
    app_config_path: str = ""
    # Serve with an empty dependency list when that document cannot be loaded
    allow_empty_config: bool = False

    # Downstream calls
    downstream_timeout: float = 10.0
    downstream_max_concurrency: int = 10


settings = DependencyProxySettings()
