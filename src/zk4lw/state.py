"""Role of a ZooKeeper server within its ensemble."""

from __future__ import annotations

from enum import Enum

from zk4lw.errors import StringParseError


class ServerState(str, Enum):
    """Server role as reported by ``zk_server_state``."""

    LEADER = "leader"
    FOLLOWER = "follower"
    OBSERVER = "observer"
    STANDALONE = "standalone"

    @classmethod
    def parse(cls, token: str, field: str = "zk_server_state") -> ServerState:
        try:
            return cls(token)
        except ValueError as exc:
            raise StringParseError(field, token) from exc

    def __str__(self) -> str:
        return self.value
