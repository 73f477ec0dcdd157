"""Ensemble registry: servers from config and their probes."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

from zk4lw.client import FourLetterWordClient
from zk4lw.config.models import ServerEntry, Zk4lwConfig
from zk4lw.ensemble.health import check_all_servers, check_server, client_for
from zk4lw.ensemble.models import ProbeResult, ServerStatus


class EnsembleRegistry:
    """Configured ZooKeeper servers with probe support."""

    def __init__(self, config: Zk4lwConfig) -> None:
        self._config = config
        self._servers: Dict[str, ServerEntry] = {key: config.resolved(key) for key in config.servers}

    @property
    def server_keys(self) -> List[str]:
        return list(self._servers.keys())

    def get_entry(self, key: str) -> Optional[ServerEntry]:
        return self._servers.get(key)

    def client_for(self, key: str) -> Optional[FourLetterWordClient]:
        entry = self._servers.get(key)
        if entry is None:
            return None
        return client_for(entry)

    async def probe_one(self, key: str) -> ProbeResult:
        entry = self._servers.get(key)
        if entry is None:
            return ProbeResult(healthy=False, error=f"Unknown server: {key}")
        return await check_server(entry)

    async def probe_all(self) -> Dict[str, ProbeResult]:
        return await check_all_servers(self._servers)

    async def get_all_statuses(self) -> List[ServerStatus]:
        probes = await self.probe_all()
        statuses: List[ServerStatus] = []
        for key, entry in self._servers.items():
            statuses.append(
                ServerStatus(
                    key=key,
                    host=entry.host,
                    port=entry.port or 0,
                    description=entry.description,
                    probe=probes.get(key),
                )
            )
        return statuses

    def get_all_statuses_sync(self) -> List[ServerStatus]:
        return asyncio.run(self.get_all_statuses())
