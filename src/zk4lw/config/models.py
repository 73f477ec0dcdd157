"""Pydantic models for zk4lw configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Identity(BaseModel):
    """Top-level identity metadata."""

    name: str = "zk4lw"
    version: str = "0.1.0"


class Defaults(BaseModel):
    """Values applied to every server that does not override them."""

    port: int = Field(default=2181, ge=1, le=65535)
    timeout: float = Field(default=10.0, gt=0)


class ServerEntry(BaseModel):
    """A ZooKeeper server in the ensemble."""

    host: str
    port: int | None = Field(default=None, ge=1, le=65535)
    timeout: float | None = Field(default=None, gt=0)
    description: str = ""

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}" if self.port else self.host


class Zk4lwConfig(BaseModel):
    """Root configuration model for .zk4lw.yaml."""

    zk4lw: Identity = Field(default_factory=Identity)
    defaults: Defaults = Field(default_factory=Defaults)
    servers: dict[str, ServerEntry] = Field(default_factory=dict)

    def resolved(self, key: str) -> ServerEntry:
        """Return the server entry with defaults filled in."""
        entry = self.servers[key]
        return entry.model_copy(
            update={
                "port": entry.port or self.defaults.port,
                "timeout": entry.timeout or self.defaults.timeout,
            }
        )
