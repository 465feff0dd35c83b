"""Pydantic schemas for the service configuration document.

The document names this service and lists the dependencies it fans out to::

    {
        "name": "checkout",
        "version": "1.4.0",
        "apps": [{"name": "payments", "url": "http://payments:9999/api/data"}]
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DependencyRef(BaseModel):
    """A downstream service called on every aggregation."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str = ""


class ServiceConfig(BaseModel):
    """Identity of this service plus its ordered dependencies."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = ""
    version: str = ""
    dependencies: tuple[DependencyRef, ...] = Field(default=(), alias="apps")

    @field_validator("dependencies", mode="before")
    @classmethod
    def _null_apps(cls, value: Any) -> Any:
        return () if value is None else value

    @property
    def has_dependencies(self) -> bool:
        return len(self.dependencies) > 0
