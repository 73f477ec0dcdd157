"""Four-letter-word command implementations.

Reference, by ZooKeeper release:
https://zookeeper.apache.org/doc/r3.4.14/zookeeperAdmin.html#sc_zkCommands
https://zookeeper.apache.org/doc/r3.5.8/zookeeperAdmin.html#sc_4lw
https://zookeeper.apache.org/doc/r3.6.1/zookeeperAdmin.html#sc_4lw
"""

from __future__ import annotations

from zk4lw.commands.base import Command
from zk4lw.commands.common import MetricSample
from zk4lw.commands.keyvalue import ConfCommand, EnviCommand, KeyValueCommand
from zk4lw.commands.mntr import MonitorCommand, MonitorResponse
from zk4lw.commands.ruok import RuokCommand, RuokResponse

COMMAND_REGISTRY: dict[str, type[Command]] = {
    "mntr": MonitorCommand,
    "ruok": RuokCommand,
    "conf": ConfCommand,
    "envi": EnviCommand,
}

__all__ = [
    "COMMAND_REGISTRY",
    "Command",
    "ConfCommand",
    "EnviCommand",
    "KeyValueCommand",
    "MetricSample",
    "MonitorCommand",
    "MonitorResponse",
    "RuokCommand",
    "RuokResponse",
]
