"""The Monitor command, ``mntr``.

Outputs a list of variables that can be used to monitor the health of the
ensemble. Available since ZooKeeper 3.4.0.

The set of keys differs between server versions: some are emitted only by
the leader, some were renamed (``zk_followers`` became ``zk_learners`` in
3.6) and 3.6 adds several hundred new metrics. Known keys are mapped onto
MonitorResponse; everything else is kept as raw strings in ``extras``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass, field, fields
from types import MappingProxyType
from typing import Any, Optional

from zk4lw.commands.base import Command
from zk4lw.commands.common import MetricSample
from zk4lw.errors import MissingFieldError, NumericParseError, VersionParseError
from zk4lw.parsing import parse_tab_separated
from zk4lw.state import ServerState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonitorResponse:
    """Decoded ``mntr`` response."""

    # version
    version: str
    revision: str
    build_date: str
    # latency
    latency: MetricSample
    # packets
    packets_received: int
    packets_sent: int
    # connections & requests
    num_alive_connections: int
    outstanding_requests: int
    # state
    server_state: ServerState
    # znodes
    znode_count: int
    watch_count: int
    ephemerals_count: int
    # data size
    approximate_data_size: int
    # file descriptors (not reported on every platform)
    open_file_descriptor_count: Optional[int] = None
    max_file_descriptor_count: Optional[int] = None
    # followers (leader only)
    followers: Optional[int] = None
    synced_followers: Optional[int] = None
    pending_syncs: Optional[int] = None
    # proposals (leader only)
    last_proposal_size: Optional[int] = None
    max_proposal_size: Optional[int] = None
    min_proposal_size: Optional[int] = None
    # keys not mapped above, verbatim; read-only
    extras: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extras", MappingProxyType(dict(self.extras)))

    def __hash__(self) -> int:
        values = tuple(getattr(self, f.name) for f in fields(self) if f.name != "extras")
        return hash((values, frozenset(self.extras.items())))

    @property
    def is_leader(self) -> bool:
        return self.server_state is ServerState.LEADER

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["latency"] = asdict(self.latency)
        data["server_state"] = self.server_state.value
        data["extras"] = dict(self.extras)
        return data


# Plain ASCII decimal only; int() and float() also take "1_000", "+5",
# non-ASCII digits, "nan" and "inf".
_INT_PATTERN = re.compile(r"-?[0-9]+")
_FLOAT_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][-+]?[0-9]+)?")


def _parse_int(key: str, raw: str) -> int:
    if not _INT_PATTERN.fullmatch(raw):
        raise NumericParseError(key, raw, "integer")
    return int(raw)


def _parse_float(key: str, raw: str) -> float:
    if not _FLOAT_PATTERN.fullmatch(raw):
        raise NumericParseError(key, raw, "float")
    return float(raw)


def _parse_version(key: str, raw: str) -> tuple[str, str, str]:
    """Split "3.4.14-4c25d48..., built on 03/06/2019 16:18 GMT"."""
    head = raw.split("-")
    if len(head) != 2:
        raise VersionParseError(raw)
    tail = head[1].split(",")
    if len(tail) != 2:
        raise VersionParseError(raw)
    return head[0].strip(), tail[0].strip(), tail[1].strip()


def _parse_state(key: str, raw: str) -> ServerState:
    return ServerState.parse(raw, field=key)


_Parser = Callable[[str, str], Any]

# Response key -> parser. Declaration order is the order missing keys are reported in.
REQUIRED_FIELDS: dict[str, _Parser] = {
    "zk_version": _parse_version,
    "zk_avg_latency": _parse_float,
    "zk_max_latency": _parse_int,
    "zk_min_latency": _parse_int,
    "zk_packets_received": _parse_int,
    "zk_packets_sent": _parse_int,
    "zk_num_alive_connections": _parse_int,
    "zk_outstanding_requests": _parse_int,
    "zk_server_state": _parse_state,
    "zk_znode_count": _parse_int,
    "zk_watch_count": _parse_int,
    "zk_ephemerals_count": _parse_int,
    "zk_approximate_data_size": _parse_int,
}

OPTIONAL_FIELDS: dict[str, _Parser] = {
    "zk_open_file_descriptor_count": _parse_int,
    "zk_max_file_descriptor_count": _parse_int,
    "zk_followers": _parse_int,
    "zk_synced_followers": _parse_int,
    "zk_pending_syncs": _parse_int,
    "zk_last_proposal_size": _parse_int,
    "zk_max_proposal_size": _parse_int,
    "zk_min_proposal_size": _parse_int,
}

# Newer key -> the key it replaces. If both appear, the newer key wins.
SYNONYMS: dict[str, str] = {
    "zk_learners": "zk_followers",
}


def _resolve_synonyms(pairs: dict[str, str]) -> dict[str, str]:
    resolved = dict(pairs)
    for alias, canonical in SYNONYMS.items():
        if alias not in resolved:
            continue
        if canonical in resolved:
            logger.debug("Both %s and %s present, using %s", alias, canonical, alias)
        resolved[canonical] = resolved.pop(alias)
    return resolved


class MonitorCommand(Command):
    command = "mntr"
    description = "Variables for monitoring the health of the ensemble"

    def decode(self, body: str) -> MonitorResponse:
        pairs = _resolve_synonyms(parse_tab_separated(body))

        values: dict[str, Any] = {}
        extras: dict[str, str] = {}
        for key, raw in pairs.items():
            parser = REQUIRED_FIELDS.get(key) or OPTIONAL_FIELDS.get(key)
            if parser is None:
                extras[key] = raw
                continue
            values[key] = parser(key, raw)

        missing = [key for key in REQUIRED_FIELDS if key not in values]
        if missing:
            raise MissingFieldError(missing)

        if extras:
            logger.debug("mntr: %d unmapped key(s)", len(extras))

        version, revision, build_date = values["zk_version"]
        return MonitorResponse(
            version=version,
            revision=revision,
            build_date=build_date,
            latency=MetricSample(
                avg=values["zk_avg_latency"],
                max=values["zk_max_latency"],
                min=values["zk_min_latency"],
            ),
            packets_received=values["zk_packets_received"],
            packets_sent=values["zk_packets_sent"],
            num_alive_connections=values["zk_num_alive_connections"],
            outstanding_requests=values["zk_outstanding_requests"],
            server_state=values["zk_server_state"],
            znode_count=values["zk_znode_count"],
            watch_count=values["zk_watch_count"],
            ephemerals_count=values["zk_ephemerals_count"],
            approximate_data_size=values["zk_approximate_data_size"],
            open_file_descriptor_count=values.get("zk_open_file_descriptor_count"),
            max_file_descriptor_count=values.get("zk_max_file_descriptor_count"),
            followers=values.get("zk_followers"),
            synced_followers=values.get("zk_synced_followers"),
            pending_syncs=values.get("zk_pending_syncs"),
            last_proposal_size=values.get("zk_last_proposal_size"),
            max_proposal_size=values.get("zk_max_proposal_size"),
            min_proposal_size=values.get("zk_min_proposal_size"),
            extras=extras,
        )
