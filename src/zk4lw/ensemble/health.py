"""Concurrent ``mntr`` probes across the ensemble."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Dict

from zk4lw.client import DEFAULT_PORT, DEFAULT_TIMEOUT, FourLetterWordClient
from zk4lw.commands.mntr import MonitorCommand
from zk4lw.config.models import ServerEntry
from zk4lw.ensemble.models import ProbeResult
from zk4lw.errors import FourLetterWordError

logger = logging.getLogger(__name__)


def client_for(entry: ServerEntry) -> FourLetterWordClient:
    """Build a client for a resolved server entry."""
    return FourLetterWordClient(
        entry.host,
        port=entry.port or DEFAULT_PORT,
        timeout=entry.timeout or DEFAULT_TIMEOUT,
    )


def probe_server(entry: ServerEntry) -> ProbeResult:
    """Run ``mntr`` against one server, blocking until it answers or fails."""
    client = client_for(entry)
    start = time.monotonic()
    try:
        monitor = client.execute(MonitorCommand())
    except FourLetterWordError as exc:
        latency = (time.monotonic() - start) * 1000
        logger.info("Probe of %s failed: %s", entry.address, exc)
        return ProbeResult(
            healthy=False,
            latency_ms=round(latency, 1),
            error=str(exc),
            error_kind=type(exc).__name__,
        )
    latency = (time.monotonic() - start) * 1000
    return ProbeResult(healthy=True, latency_ms=round(latency, 1), monitor=monitor)


async def check_server(entry: ServerEntry) -> ProbeResult:
    """Probe one server from a worker thread."""
    return await asyncio.to_thread(probe_server, entry)


async def check_all_servers(servers: Dict[str, ServerEntry]) -> Dict[str, ProbeResult]:
    """Probe every server concurrently."""
    tasks = {key: check_server(entry) for key, entry in servers.items()}
    results = await asyncio.gather(*tasks.values(), return_exceptions=True)
    out: Dict[str, ProbeResult] = {}
    for key, result in zip(tasks.keys(), results):
        if isinstance(result, Exception):
            out[key] = ProbeResult(healthy=False, error=str(result), error_kind=type(result).__name__)
        else:
            out[key] = result
    return out
