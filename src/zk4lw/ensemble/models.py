"""Data models for server probes and status."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from zk4lw.commands.mntr import MonitorResponse


@dataclass
class ProbeResult:
    """Result of running ``mntr`` against a single server."""

    healthy: bool
    latency_ms: float = 0.0
    monitor: Optional[MonitorResponse] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None


@dataclass
class ServerStatus:
    """Full status of a configured server."""

    key: str
    host: str
    port: int
    description: str = ""
    probe: Optional[ProbeResult] = None

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def status_label(self) -> str:
        if self.probe is None:
            return "unknown"
        if self.probe.healthy:
            return "healthy"
        if self.probe.error_kind in ("TransportError", "EncodingError"):
            return "unreachable"
        return "unhealthy"
