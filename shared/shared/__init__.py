"""Dependency Proxy shared utilities package."""

from shared.config import BaseServiceSettings
from shared.logging import setup_logging

__all__ = ["setup_logging", "BaseServiceSettings"]
