"""Server listing and command endpoints."""

from __future__ import annotations

import asyncio
from dataclasses import asdict, is_dataclass
from typing import Any, Dict, List

from fastapi import APIRouter, HTTPException

from zk4lw.commands import COMMAND_REGISTRY
from zk4lw.config.loader import load_config
from zk4lw.ensemble.registry import EnsembleRegistry
from zk4lw.errors import DecodeError, FourLetterWordError

router = APIRouter(tags=["servers"])


def _get_registry() -> EnsembleRegistry:
    config = load_config()
    return EnsembleRegistry(config)


def _to_json(result: Any) -> Any:
    if hasattr(result, "to_dict"):
        return result.to_dict()
    if is_dataclass(result):
        return asdict(result)
    return result


@router.get("/servers")
async def list_servers() -> List[Dict[str, Any]]:
    registry = _get_registry()
    statuses = await registry.get_all_statuses()
    out: List[Dict[str, Any]] = []
    for s in statuses:
        monitor = s.probe.monitor if s.probe else None
        out.append(
            {
                "key": s.key,
                "address": s.address,
                "description": s.description,
                "status": s.status_label,
                "server_state": monitor.server_state.value if monitor else None,
                "version": monitor.version if monitor else None,
                "latency_ms": s.probe.latency_ms if s.probe else None,
                "error": s.probe.error if s.probe else None,
            }
        )
    return out


@router.get("/servers/{name}/{command}")
async def run_command(name: str, command: str) -> Dict[str, Any]:
    registry = _get_registry()
    client = registry.client_for(name)
    if client is None:
        raise HTTPException(status_code=404, detail=f"Unknown server: {name}")
    command_cls = COMMAND_REGISTRY.get(command)
    if command_cls is None:
        raise HTTPException(status_code=404, detail=f"Unknown command: {command}")

    try:
        result = await asyncio.to_thread(client.execute, command_cls())
    except DecodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except FourLetterWordError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return {"server": name, "command": command, "result": _to_json(result)}
