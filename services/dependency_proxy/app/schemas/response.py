"""Pydantic schemas for the aggregated dependency tree."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Self status of a node whose dependencies all answered
STATUS_HEALTHY = "201"
# Self status of a node with at least one failed dependency
STATUS_UNAVAILABLE = "503"
# Status of a placeholder node built for a failed dependency
STATUS_UNREACHABLE = "0"

UNKNOWN_VERSION = "unknown"


class ResponseNode(BaseModel):
    """One service in the dependency tree.

    Leaves carry no ``dependencies`` key on the wire. Downstream bodies may
    still use the legacy capitalised ``Dependencies`` key, which is accepted
    on input only.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = ""
    version: str = ""
    status: str = ""
    dependencies: list[ResponseNode] | None = Field(
        default=None,
        validation_alias=AliasChoices("dependencies", "Dependencies"),
    )

    @classmethod
    def placeholder(cls, name: str) -> ResponseNode:
        """Node standing in for a dependency whose own report is unavailable."""
        return cls(name=name, version=UNKNOWN_VERSION, status=STATUS_UNREACHABLE)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)
